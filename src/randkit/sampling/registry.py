"""Registry of sampler resolvers and draw algorithms.

Algorithms plug into the protocol by registering, per request shape and
key, a resolver ``(rng, request, repetition) -> Sampler`` and a draw
function ``(rng, sampler) -> value``. Keys are classes (looked up along
the MRO, then by ``issubclass`` for abstract base classes) or, for
``RequestShape.TAG``, tag strings. Either may be restricted to an engine
class; the most derived engine registration wins.
"""

from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, get_origin

from randkit.engines.base import Engine
from randkit.ir.distributions import Distribution
from randkit.config.logging import get_logger
from .samplers import Sampler, SamplerTag, SamplerTrivial, SamplerType

logger = get_logger(__name__)


class RequestShape(str, Enum):
    """Closed set of request shapes the registry dispatches on."""

    TYPE = "type"
    VALUE = "value"
    DISTRIBUTION = "distribution"
    TAG = "tag"


Resolver = Callable[[Engine, Any, Any], Sampler]
DrawFunc = Callable[[Engine, Sampler], Any]
RegistryKey = Tuple[RequestShape, Any, type]

RESOLVERS: Dict[RegistryKey, Resolver] = {}
DRAWS: Dict[RegistryKey, DrawFunc] = {}


def request_shape(request: Any) -> RequestShape:
    """Classify a (non-sampler) request."""
    if isinstance(request, Distribution):
        return RequestShape.DISTRIBUTION
    if isinstance(request, type) or get_origin(request) is not None:
        return RequestShape.TYPE
    return RequestShape.VALUE


def _lookup_class(shape: RequestShape, request: Any) -> Any:
    if shape is RequestShape.TYPE:
        return get_origin(request) or request
    return type(request)


def register_resolver(
    shape: RequestShape, key: Any, func: Resolver, engine: type = Engine
) -> None:
    """
    Register a resolver for requests of ``shape`` matching ``key``.

    Args:
        shape: Request shape (TYPE, VALUE or DISTRIBUTION)
        key: Class the request (or, for TYPE, the requested type) must match
        func: Resolver returning a Sampler
        engine: Engine class the resolver applies to
    """
    if shape is RequestShape.TAG:
        raise ValueError("Resolvers cannot be registered for tags")
    RESOLVERS[(shape, key, engine)] = func
    logger.info(f"Registered resolver for {shape.value} {_key_name(key)} ({engine.__name__})")


def register_draw(shape: RequestShape, key: Any, func: DrawFunc, engine: type = Engine) -> None:
    """
    Register the draw algorithm for samplers matching ``key``.

    ``SamplerType`` is matched by its carried type (shape TYPE),
    ``SamplerTrivial`` by the class of its value (VALUE or DISTRIBUTION)
    and ``SamplerTag`` by its tag (TAG).
    """
    DRAWS[(shape, key, engine)] = func
    logger.info(f"Registered draw for {shape.value} {_key_name(key)} ({engine.__name__})")


def resolver(shape: RequestShape, key: Any, engine: type = Engine) -> Callable[[Resolver], Resolver]:
    """Decorator form of register_resolver."""

    def decorate(func: Resolver) -> Resolver:
        register_resolver(shape, key, func, engine)
        return func

    return decorate


def drawer(shape: RequestShape, key: Any, engine: type = Engine) -> Callable[[DrawFunc], DrawFunc]:
    """Decorator form of register_draw."""

    def decorate(func: DrawFunc) -> DrawFunc:
        register_draw(shape, key, func, engine)
        return func

    return decorate


def _key_name(key: Any) -> str:
    return key if isinstance(key, str) else getattr(key, "__qualname__", repr(key))


def _engine_classes(rng: Engine) -> List[type]:
    return [cls for cls in type(rng).__mro__ if isinstance(cls, type) and issubclass(cls, Engine)]


def _candidates(table: Dict[RegistryKey, Any], shape: RequestShape, cls: Any) -> Iterator[Any]:
    """Keys to try for ``cls``: its MRO first, then abstract bases it satisfies."""
    if shape is RequestShape.TAG:
        yield cls
        return
    if not isinstance(cls, type):
        return
    mro = [c for c in cls.__mro__ if c is not object]
    yield from mro
    seen = set(mro)
    for (s, key, _), _ in list(table.items()):
        if s is shape and isinstance(key, type) and key not in seen and key is not object:
            if issubclass(cls, key):
                seen.add(key)
                yield key


def _find(table: Dict[RegistryKey, Any], rng: Engine, shape: RequestShape, cls: Any) -> Optional[Any]:
    engines = _engine_classes(rng)
    for key in _candidates(table, shape, cls):
        for engine_cls in engines:
            func = table.get((shape, key, engine_cls))
            if func is not None:
                return func
    return None


def find_resolver(rng: Engine, request: Any) -> Optional[Resolver]:
    """Most specific resolver for ``request`` on ``rng``, or None."""
    shape = request_shape(request)
    return _find(RESOLVERS, rng, shape, _lookup_class(shape, request))


def find_draw(rng: Engine, sampler: Sampler) -> Optional[DrawFunc]:
    """Draw algorithm for ``sampler`` on ``rng``, or None."""
    if isinstance(sampler, SamplerTag):
        return _find(DRAWS, rng, RequestShape.TAG, sampler.tag)
    if isinstance(sampler, SamplerType):
        return _find(DRAWS, rng, RequestShape.TYPE, _lookup_class(RequestShape.TYPE, sampler.kind))
    if isinstance(sampler, SamplerTrivial):
        if isinstance(sampler.value, Distribution):
            shape = RequestShape.DISTRIBUTION
        else:
            shape = RequestShape.VALUE
        return _find(DRAWS, rng, shape, type(sampler.value))
    return None


def list_resolvers() -> List[str]:
    """Registered resolver keys, for diagnostics."""
    return sorted(f"{s.value}:{_key_name(k)}@{e.__name__}" for s, k, e in RESOLVERS)


def list_draws() -> List[str]:
    """Registered draw keys, for diagnostics."""
    return sorted(f"{s.value}:{_key_name(k)}@{e.__name__}" for s, k, e in DRAWS)
