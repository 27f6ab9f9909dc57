"""Logging configuration for error_utils.

The library logs under the ``packages.error_utils`` logger and never touches
the root logger. Applications that want its records on a stream call
``configure_logging`` directly, or ``setup_logging`` to take the options from
settings.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import IO, Any

from . import fields
from .context import bind_context, get_context

LIBRARY_LOGGER = "packages.error_utils"

# Passed as ``extra`` by the boundaries for each classified failure.
CLASSIFICATION_FIELDS: tuple[str, ...] = (
    fields.BOUNDARY,
    fields.ERROR_CODE,
    fields.ERROR_CATEGORY,
    fields.EXCEPTION_TYPE,
)


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return bound context plus any classification fields the record carries."""
    collected: dict[str, Any] = dict(getattr(record, "context", None) or {})
    for name in CLASSIFICATION_FIELDS:
        if hasattr(record, name):
            collected[name] = getattr(record, name)
    return collected


class ContextFilter(logging.Filter):
    """Snapshot the bound logging context onto each record as ``record.context``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = get_context()
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line: core fields, then context and classification."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        payload.update(record_fields(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Single-line text with ``key=value`` pairs appended in key order."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra = record_fields(record)
        if not extra:
            return line
        return line + " " + " ".join(f"{key}={extra[key]}" for key in sorted(extra))


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a single stream handler to the library logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.
    """
    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.handlers.clear()
    logger.setLevel(level.upper())

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())

    logger.addHandler(handler)
    logger.propagate = False

    bind_context(**{fields.SERVICE: service, fields.ENVIRONMENT: environment})
    return logger


def setup_logging(settings: Any = None, *, stream: IO[str] | None = None) -> logging.Logger:
    """Configure library logging from ``ErrorUtilsSettings.logging``."""
    if settings is None:
        from packages.error_utils.config import get_settings

        settings = get_settings()
    options = settings.logging
    return configure_logging(
        level=options.level,
        json_output=options.json_output,
        service=options.service,
        environment=options.environment,
        stream=stream,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
