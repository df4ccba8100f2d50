"""Logging for randkit.

Every module logs under the ``randkit`` logger tree: debug for resolution
and sampler construction, info for registration, reseeding and default
engine creation, warning when distinct sampling gives up. The tree does
not propagate to the root logger, and its handlers write to stderr so
values printed by the CLI on stdout are never mixed with diagnostics.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from .settings import get_settings

ROOT_LOGGER = "randkit"

DEFAULT_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(message)s"
)


def _handler(handler: logging.Handler, level: int, format_string: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> None:
    """
    (Re)configure the ``randkit`` logger tree.

    Calling it again replaces the previous handlers, so the CLI can apply
    the settings once per command.

    Args:
        level: Level name; defaults to the ``log_level`` setting (WARNING)
        log_file: Also append records to this file; defaults to ``log_file``
        format_string: Record format; defaults to DEFAULT_FORMAT
    """
    settings = get_settings()
    numeric_level = getattr(logging, (level or settings.log_level).upper())
    log_file_path = log_file or settings.log_file
    format_string = format_string or DEFAULT_FORMAT

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()
    logger.addHandler(_handler(logging.StreamHandler(sys.stderr), numeric_level, format_string))
    if log_file_path:
        logger.addHandler(
            _handler(logging.FileHandler(log_file_path, encoding="utf-8"), numeric_level, format_string)
        )
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a randkit module, configuring the tree on first use.

    Names outside the package (for example a plugin registering its own
    draw rules) are placed under ``randkit.`` as well.
    """
    if not logging.getLogger(ROOT_LOGGER).handlers:
        setup_logging()
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
