"""Typed success-or-``Error`` container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from packages.error_utils.errors import BadExpectedAccessError, Error

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Holds either a success ``payload`` or a failure ``detail``, never both.

    A success with ``payload=None`` is the no-value success (``VoidResult``).
    """

    payload: T | None = None
    detail: Error | None = None

    def __post_init__(self) -> None:
        if self.detail is None:
            return
        if not isinstance(self.detail, Error):
            raise TypeError(f"Result detail must be an Error, got {type(self.detail).__name__}")
        if not self.detail:
            raise ValueError("a failed Result requires an Error other than success")
        if self.payload is not None:
            raise ValueError("a Result cannot hold both a value and an error")

    @property
    def ok(self) -> bool:
        """Return True when this result holds a value."""
        return self.detail is None

    def __bool__(self) -> bool:
        return self.ok

    @property
    def value(self) -> T:
        """Return the success value, raising ``BadExpectedAccessError`` on failure."""
        if self.detail is not None:
            raise BadExpectedAccessError(
                "bad access to Result without expected value", self.detail
            )
        return self.payload  # type: ignore[return-value]

    @property
    def error(self) -> Error:
        """Return the failure, raising ``BadExpectedAccessError`` on success."""
        if self.detail is None:
            raise BadExpectedAccessError("bad access to Result error on success")
        return self.detail

    def value_or(self, default: T) -> T:
        if self.detail is not None:
            return default
        return self.payload  # type: ignore[return-value]

    def map(self, func: Callable[[T], U]) -> Result[U]:
        """Apply ``func`` to the value; failures pass through unchanged."""
        if self.detail is not None:
            return Result(detail=self.detail)
        return Result(payload=func(self.payload))  # type: ignore[arg-type]

    def and_then(self, func: Callable[[T], Result[U]]) -> Result[U]:
        if self.detail is not None:
            return Result(detail=self.detail)
        return func(self.payload)  # type: ignore[arg-type]

    def map_error(self, func: Callable[[Error], Error]) -> Result[T]:
        if self.detail is None:
            return self
        return Result(detail=func(self.detail))

    def __repr__(self) -> str:
        if self.detail is not None:
            return f"Result(error={self.detail!r})"
        return f"Result(value={self.payload!r})"


VoidResult = Result[None]
StringResult = Result[str]
IntResult = Result[int]
BoolResult = Result[bool]
