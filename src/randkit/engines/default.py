"""Process-wide default engine.

The default engine is created lazily on first use from the current
settings, reseeded on demand with ``seed_default_engine`` and dropped with
``reset_default_engine``. Code that needs reproducibility or isolation
should pass its own engine instead.
"""

from typing import Callable, Dict, Optional

from .base import Engine
from .device import RandomDevice
from .numpy_engines import MersenneTwister, PCG64Engine
from randkit.config.settings import get_settings
from randkit.config.logging import get_logger

logger = get_logger(__name__)

ENGINES: Dict[str, Callable[..., Engine]] = {
    "mersenne": MersenneTwister,
    "pcg64": PCG64Engine,
    "device": RandomDevice,
}

_default_engine: Optional[Engine] = None


def make_engine(kind: str = "mersenne", seed: Optional[int] = None) -> Engine:
    """
    Create an engine by name.

    Args:
        kind: One of the keys of ENGINES
        seed: Optional seed

    Raises:
        KeyError: If the engine name is unknown
    """
    if kind not in ENGINES:
        available = ", ".join(sorted(ENGINES.keys()))
        raise KeyError(f"Engine '{kind}' not found. Available engines: {available}")
    engine = ENGINES[kind]()
    if seed is not None:
        engine.reseed(seed)
    return engine


def get_default_engine() -> Engine:
    """Get or create the process-wide default engine."""
    global _default_engine
    if _default_engine is None:
        settings = get_settings()
        _default_engine = make_engine(settings.engine, settings.seed)
        logger.info(
            f"Created default engine {settings.engine!r} (seed={settings.seed})"
        )
    return _default_engine


def seed_default_engine(seed: Optional[int] = None) -> Engine:
    """Reseed the default engine, creating it first if needed."""
    engine = get_default_engine().reseed(seed)
    logger.info(f"Reseeded default engine (seed={seed})")
    return engine


def reset_default_engine() -> None:
    """Drop the default engine; the next use creates a fresh one."""
    global _default_engine
    _default_engine = None
