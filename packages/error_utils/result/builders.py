"""Convenience constructors for ``Result`` values."""

from __future__ import annotations

import re
from typing import Any, TypeVar

from packages.error_utils.errors import (
    Error,
    ErrorCode,
    ErrorLike,
    classify_regex_error,
    compose_context,
)

from .result import Result
from .status import ERRNO, StatusFlag, last_error

T = TypeVar("T")


def success(value: T = None) -> Result[T]:  # type: ignore[assignment]
    """Build a successful result; ``success()`` is the no-value success."""
    return Result(payload=value)


def failure(error: Error) -> Result[Any]:
    """Build a failed result from an existing ``Error``."""
    return Result(detail=error)


def make_error(code: ErrorLike, context: str = "") -> Result[Any]:
    """Build a failed result from any code-like value plus context."""
    return Result(detail=Error(code, context))


def make_error_from_errno(context: str = "", *, flag: StatusFlag = ERRNO) -> Result[Any]:
    """Build a failed result from the status flag, clearing it.

    A flag that was never set still yields a failure, as ``UNKNOWN_ERROR``.
    """
    code = last_error(flag)
    if not code:
        return Result(detail=Error(ErrorCode.UNKNOWN_ERROR, context))
    return Result(detail=Error(code, context))


def make_regex_error(
    exc: re.error | str, context: str = "", *, include_detail: bool = True
) -> Result[Any]:
    """Build a failed result from a regex compilation failure.

    With ``include_detail`` the mapped description is appended to the context.
    Callers whose context already carries the failure's own text pass
    ``include_detail=False`` so it is not repeated.
    """
    detail, code = classify_regex_error(exc)
    if include_detail:
        context = compose_context(context, detail)
    return Result(detail=Error(code, context))
