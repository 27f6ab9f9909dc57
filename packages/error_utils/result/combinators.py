"""Combinators over several ``Result`` values."""

from __future__ import annotations

from typing import Any, Iterable

from packages.error_utils.errors import Error, ErrorCode

from .builders import failure
from .result import Result

NO_ALTERNATIVES_CONTEXT = "No alternatives provided."
ALTERNATIVE_SEPARATOR = "; "


def first_of(results: Iterable[Result[Any]]) -> Result[Any]:
    """Return the first successful result, or a failure naming every attempt.

    Results are examined in order. When all of them failed, the combined
    failure is ``UNKNOWN_ERROR`` with each failure's message joined by
    ``"; "``; an empty input is an invalid argument.
    """
    messages: list[str] = []
    for result in results:
        if result.ok:
            return result
        messages.append(result.error.message())

    if not messages:
        return failure(Error(ErrorCode.INVALID_ARGUMENT, NO_ALTERNATIVES_CONTEXT))
    return failure(Error(ErrorCode.UNKNOWN_ERROR, ALTERNATIVE_SEPARATOR.join(messages)))
