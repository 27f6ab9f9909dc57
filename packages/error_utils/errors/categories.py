"""Error categories and the canonical ``Code`` form.

A category is the metadata provider for one code space: it names the space,
renders a message for any integer value in it, and optionally maps values onto
an ``ErrorCondition``. Every code-like input (``ErrorCode`` members, errno
integers, registered enums) is resolved to a ``Code`` exactly once, at
construction time, so comparisons never re-classify.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache, total_ordering
from typing import Callable, Union

from .codes import (
    CODE_TABLE,
    CodeInfo,
    CONDITION_MESSAGES,
    FUTURE_MESSAGES,
    SUCCESS_VALUE,
    UNRECOGNIZED_CODE_MESSAGE,
    UNRECOGNIZED_CONDITION_MESSAGE,
    UNRECOGNIZED_FUTURE_MESSAGE,
    UNRECOGNIZED_SYSTEM_MESSAGE,
    ErrorCode,
    ErrorCondition,
    FutureErrc,
)


class ErrorCategory(ABC):
    """Name, messages and condition mapping for one code space."""

    name: str

    @abstractmethod
    def message(self, value: int) -> str:
        """Return the human-readable message for ``value``; never raises."""

    def default_condition(self, value: int) -> ErrorCondition | None:
        """Return the coarse condition ``value`` belongs to, if any."""
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class ErrorCodeCategory(ErrorCategory):
    name = "ErrorCode"

    def message(self, value: int) -> str:
        info = _code_info(value)
        return info.message if info is not None else UNRECOGNIZED_CODE_MESSAGE

    def default_condition(self, value: int) -> ErrorCondition | None:
        info = _code_info(value)
        if info is None:
            return ErrorCondition.OTHER_ERROR
        return info.condition


class ErrorConditionCategory(ErrorCategory):
    name = "ErrorCondition"

    def message(self, value: int) -> str:
        try:
            return CONDITION_MESSAGES[ErrorCondition(value)]
        except ValueError:
            return UNRECOGNIZED_CONDITION_MESSAGE

    def default_condition(self, value: int) -> ErrorCondition | None:
        try:
            return ErrorCondition(value)
        except ValueError:
            return None


class GenericCategory(ErrorCategory):
    """Platform errno values, with messages from the C library."""

    name = "generic"

    def message(self, value: int) -> str:
        if value == SUCCESS_VALUE:
            return "Success"
        try:
            return os.strerror(value)
        except (ValueError, OverflowError):
            return UNRECOGNIZED_SYSTEM_MESSAGE


class FutureCategory(ErrorCategory):
    name = "future"

    def message(self, value: int) -> str:
        try:
            return FUTURE_MESSAGES[FutureErrc(value)]
        except ValueError:
            return UNRECOGNIZED_FUTURE_MESSAGE


@lru_cache(maxsize=1)
def error_code_category() -> ErrorCategory:
    """Return the process-wide ``ErrorCode`` category."""
    return ErrorCodeCategory()


@lru_cache(maxsize=1)
def error_condition_category() -> ErrorCategory:
    """Return the process-wide ``ErrorCondition`` category."""
    return ErrorConditionCategory()


@lru_cache(maxsize=1)
def generic_category() -> ErrorCategory:
    """Return the process-wide errno category."""
    return GenericCategory()


@lru_cache(maxsize=1)
def future_category() -> ErrorCategory:
    """Return the process-wide future/executor category."""
    return FutureCategory()


@total_ordering
@dataclass(frozen=True)
class Code:
    """Canonical ``(value, category)`` pair, comparable across code spaces.

    Equality and hashing cover both fields; ordering is by numeric value with
    the category name breaking ties, so the order is total.
    """

    value: int
    category: ErrorCategory

    def __bool__(self) -> bool:
        return self.value != SUCCESS_VALUE

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Code):
            return NotImplemented
        return self.sort_key < other.sort_key

    @property
    def sort_key(self) -> tuple[int, str]:
        return (self.value, self.category.name)

    def message(self) -> str:
        return self.category.message(self.value)

    def default_condition(self) -> ErrorCondition | None:
        return self.category.default_condition(self.value)

    def __repr__(self) -> str:
        return f"Code(value={self.value}, category={self.category.name!r})"


CodeLike = Union[Code, Enum, int]

_CategoryFactory = Callable[[], ErrorCategory]

_REGISTERED_ENUMS: dict[type[Enum], _CategoryFactory] = {}


def register_category(
    enum_type: type[Enum], category: ErrorCategory | _CategoryFactory
) -> None:
    """Register the category that members of ``enum_type`` resolve into.

    ``category`` may be a category instance or a zero-argument factory; a
    factory is resolved lazily on first use.
    """
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise TypeError(f"{enum_type!r} is not an Enum type")
    if isinstance(category, ErrorCategory):
        instance = category
        _REGISTERED_ENUMS[enum_type] = lambda: instance
        return
    _REGISTERED_ENUMS[enum_type] = category


def success_code() -> Code:
    """Return the "no error" code."""
    return Code(SUCCESS_VALUE, generic_category())


def make_code(code: CodeLike, category: ErrorCategory | None = None) -> Code:
    """Resolve any code-like value into its canonical ``Code``.

    Plain integers are errno values unless ``category`` says otherwise.
    Unregistered enums are rejected rather than guessed at.
    """
    if isinstance(code, Code):
        return code
    if isinstance(code, bool):
        raise TypeError("bool is not an error code")

    if isinstance(code, Enum):
        factory = _lookup_enum_category(type(code))
        if factory is None:
            raise TypeError(f"no error category registered for {type(code).__name__}")
        return Code(int(code.value), factory())

    if isinstance(code, int):
        return Code(int(code), category if category is not None else generic_category())

    raise TypeError(f"cannot convert {type(code).__name__} to an error code")


def condition_of(code: CodeLike) -> ErrorCondition | None:
    """Return the ``ErrorCondition`` a code belongs to.

    Total over ``ErrorCode``. System and future codes keep their own category
    and are not remapped, so they yield ``None``.
    """
    return make_code(code).default_condition()


def _lookup_enum_category(enum_type: type[Enum]) -> _CategoryFactory | None:
    for klass in enum_type.__mro__:
        factory = _REGISTERED_ENUMS.get(klass)
        if factory is not None:
            return factory
    return None


def _code_info(value: int) -> CodeInfo | None:
    try:
        return CODE_TABLE[ErrorCode(value)]
    except ValueError:
        return None


register_category(ErrorCode, error_code_category)
register_category(ErrorCondition, error_condition_category)
register_category(FutureErrc, future_category)
