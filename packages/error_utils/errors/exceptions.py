"""Failure kinds with no direct builtin counterpart.

Each class subclasses the builtin it is closest to, so callers that already
catch the builtin keep working; the classification table matches these
before their builtin parents.
"""

from __future__ import annotations

from typing import Any

from .codes import FUTURE_MESSAGES, FutureErrc


class LengthError(ValueError):
    """A size or length exceeded what the operation allows."""


class UnderflowError(ArithmeticError):
    """An arithmetic result was too small to represent."""


class NonexistentLocalTimeError(ValueError):
    """A local wall-clock time falls in a gap (e.g. a DST jump forward)."""


class AmbiguousLocalTimeError(ValueError):
    """A local wall-clock time occurs twice (e.g. a DST fall back)."""


class FormatError(ValueError):
    """A format string or format arguments were invalid."""


class BadTypeidError(TypeError):
    """Type information was requested for an absent object."""


class BadFunctionCallError(TypeError):
    """An empty callable slot was invoked."""


class BadAccessError(LookupError):
    """Base for access-without-value failures."""


class BadOptionalAccessError(BadAccessError):
    """An optional value was read while empty."""


class BadVariantAccessError(BadAccessError):
    """A variant was read as an alternative it does not hold."""


class BadExpectedAccessError(BadAccessError):
    """A ``Result`` was read for the side it does not hold."""

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.error = error


class BadException(Exception):
    """A failure occurred while producing a failure."""


class FutureError(RuntimeError):
    """A future/promise protocol violation carrying its own code."""

    def __init__(self, code: FutureErrc, message: str | None = None) -> None:
        self.code = FutureErrc(code)
        super().__init__(message or FUTURE_MESSAGES[self.code])
