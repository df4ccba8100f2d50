"""Utility helpers."""

from .error_logging import log_error

__all__ = ["log_error"]
