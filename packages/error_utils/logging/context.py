"""Structured logging context carried in a ``ContextVar``.

Fields bound here ride along on every record that passes ``ContextFilter``.
The stored mapping is never mutated in place: every change installs a new
one, so a context copied into another task or thread is unaffected.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from types import MappingProxyType
from typing import Iterator, Mapping

_EMPTY: Mapping[str, str] = MappingProxyType({})

_LOG_CONTEXT: ContextVar[Mapping[str, str]] = ContextVar(
    "error_utils_log_context", default=_EMPTY
)


def _stringified(values: Mapping[str, object]) -> dict[str, str]:
    return {str(key): str(value) for key, value in values.items() if value is not None}


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound in the current context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> Token[Mapping[str, str]]:
    """Add fields to the current context; ``None`` values are skipped.

    Returns the token of the change, which ``ContextVar.reset`` accepts.
    """
    merged = {**_LOG_CONTEXT.get(), **_stringified(values)}
    return _LOG_CONTEXT.set(MappingProxyType(merged))


def clear_context(*keys: str) -> None:
    """Drop the named fields, or every field when no names are given."""
    if not keys:
        _LOG_CONTEXT.set(_EMPTY)
        return
    remaining = {k: v for k, v in _LOG_CONTEXT.get().items() if k not in keys}
    _LOG_CONTEXT.set(MappingProxyType(remaining))


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of the block only."""
    token = bind_context(**{str(key): value for key, value in values.items()})
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)
