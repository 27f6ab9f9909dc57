"""Logging helpers for error_utils.

Wraps Python's ``logging`` module with stream defaults and structured
context propagation used by the failure boundaries.
"""

from .config import (
    CLASSIFICATION_FIELDS,
    LIBRARY_LOGGER,
    ContextFilter,
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    get_logger,
    setup_logging,
)
from .context import bind_context, clear_context, get_context, log_context

__all__ = [
    "bind_context",
    "CLASSIFICATION_FIELDS",
    "clear_context",
    "configure_logging",
    "ContextFilter",
    "get_context",
    "get_logger",
    "JsonFormatter",
    "LIBRARY_LOGGER",
    "log_context",
    "PlainFormatter",
    "setup_logging",
]
