"""Error logging utilities for sampling and generation."""

import traceback
from typing import Any, Dict, Optional
from randkit.config.logging import get_logger

logger = get_logger(__name__)


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    operation: Optional[str] = None,
    log_level: str = "error",
) -> None:
    """
    Log an error with its type, message and context.

    Args:
        error: The exception that occurred
        context: Additional context dictionary (e.g., {'request': 'int', 'repetition': 'many'})
        operation: Description of the operation being performed
        log_level: Logging level ('error', 'warning', 'critical')
    """
    error_type = type(error).__name__

    context_parts = []
    if operation:
        context_parts.append(f"Operation: {operation}")
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        context_parts.append(f"Context: {context_str}")

    error_msg = f"[{error_type}] {error}"
    if context_parts:
        error_msg += " | " + " | ".join(context_parts)

    if log_level.lower() == "critical":
        logger.critical(error_msg)
    elif log_level.lower() == "warning":
        logger.warning(error_msg)
    else:
        logger.error(error_msg)

    logger.debug(f"Stack at {error_type}:\n{''.join(traceback.format_stack(limit=8))}")
