"""The ``Error`` value: a categorized code plus free-form context."""

from __future__ import annotations

from functools import total_ordering
from typing import Union

from .categories import Code, CodeLike, ErrorCategory, make_code, success_code
from .codes import ErrorCondition

ErrorLike = Union["Error", CodeLike]


@total_ordering
class Error:
    """Immutable failure value.

    ``Error()`` is the "no error" sentinel and is falsy. Equality, ordering
    and hashing look at the code only; two errors that differ only in context
    are equal.
    """

    __slots__ = ("_code", "_context")

    def __init__(self, code: ErrorLike | None = None, context: str = "") -> None:
        if code is None:
            resolved = success_code()
        elif isinstance(code, Error):
            resolved = code.code
        else:
            resolved = make_code(code)
        object.__setattr__(self, "_code", resolved)
        object.__setattr__(self, "_context", str(context))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def code(self) -> Code:
        return self._code

    @property
    def context(self) -> str:
        return self._context

    @property
    def value(self) -> int:
        """Return the numeric code this error was constructed from."""
        return self._code.value

    @property
    def category(self) -> ErrorCategory:
        return self._code.category

    def __bool__(self) -> bool:
        return bool(self._code)

    def message(self) -> str:
        """Return ``"{context}: {category message}"``, or just the category
        message when there is no context."""
        base = self._code.message()
        if not self._context:
            return base
        return f"{self._context}: {base}"

    def condition(self) -> ErrorCondition | None:
        return self._code.default_condition()

    def is_(self, candidate: ErrorLike | ErrorCondition) -> bool:
        """Return True when this error has ``candidate``'s code.

        An ``ErrorCondition`` candidate matches by group instead: the error's
        default condition must equal it.
        """
        if isinstance(candidate, ErrorCondition):
            return self.condition() == candidate
        if isinstance(candidate, Error):
            return self._code == candidate.code
        return self._code == make_code(candidate)

    def is_any_of(self, *candidates: ErrorLike | ErrorCondition) -> bool:
        return any(self.is_(candidate) for candidate in candidates)

    def with_context(self, prefix: str) -> Error:
        """Return a copy with ``prefix`` prepended to the context.

        The code is carried over unchanged; only the context grows.
        """
        if not prefix:
            return self
        if not self._context:
            return Error(self._code, prefix)
        return Error(self._code, f"{prefix}: {self._context}")

    def __eq__(self, other: object) -> bool:
        other_code = _comparable_code(other)
        if other_code is None:
            return NotImplemented
        return self._code == other_code

    def __lt__(self, other: object) -> bool:
        other_code = _comparable_code(other)
        if other_code is None:
            return NotImplemented
        return self._code < other_code

    def __hash__(self) -> int:
        return hash(self._code)

    def __str__(self) -> str:
        return (
            f"{self.message()}\n"
            f"(error_code: {self.value} ({self.category.name} category))"
        )

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"Error(code={self._code!r}, context={self._context!r})"

    def __copy__(self) -> Error:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Error:
        return self


def swap(lhs: Error, rhs: Error) -> tuple[Error, Error]:
    """Exchange two errors as whole (code, context) pairs.

    ``a, b = swap(a, b)``; neither value is modified.
    """
    return rhs, lhs


def _comparable_code(other: object) -> Code | None:
    if isinstance(other, Error):
        return other.code
    if isinstance(other, Code):
        return other
    return None
