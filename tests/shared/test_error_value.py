"""Tests for the immutable ``Error`` value type."""

from __future__ import annotations

import copy
import errno
import os

import pytest

from packages.error_utils.errors import (
    Error,
    ErrorCode,
    ErrorCondition,
    FutureErrc,
    condition_of,
    make_code,
    swap,
)


def test_default_error_means_no_error() -> None:
    """A default-constructed Error is the falsy success sentinel."""
    err = Error()

    assert not err
    assert err.value == 0
    assert err.context == ""
    assert err.category.name == "generic"
    assert err.message() == "Success"


def test_error_keeps_the_value_it_was_built_from() -> None:
    """Numeric value and category survive construction unchanged."""
    assert Error(errno.ENOENT).value == errno.ENOENT
    assert Error(ErrorCode.BAD_CAST).value == int(ErrorCode.BAD_CAST)
    assert Error(ErrorCode.BAD_CAST).category.name == "ErrorCode"
    assert Error(FutureErrc.NO_STATE).category.name == "future"


def test_error_from_error_copies_the_code_only() -> None:
    """Wrapping an Error keeps its code and takes the new context."""
    inner = Error(errno.EIO, "disk")
    outer = Error(inner, "backup")

    assert outer.code is inner.code
    assert outer.context == "backup"


def test_message_prefixes_context() -> None:
    """Context is joined to the category message with a colon."""
    assert Error(errno.EINVAL, "opening config").message() == (
        "opening config: Invalid argument"
    )
    assert Error(ErrorCode.LENGTH_ERROR).message() == "Length error exception"


def test_str_appends_code_and_category() -> None:
    """Formatting shows the message, then the numeric code and category."""
    err = Error(errno.EINVAL, "opening config")

    assert str(err) == (
        "opening config: Invalid argument\n(error_code: 22 (generic category))"
    )
    assert format(err) == str(err)
    assert f"{err}".endswith("(generic category))")


def test_equality_ignores_context() -> None:
    """Two errors with the same code are equal whatever their context."""
    assert Error(errno.EINVAL, "a") == Error(errno.EINVAL, "b")
    assert Error(errno.EINVAL) != Error(errno.EACCES)
    assert Error(errno.EINVAL) == make_code(errno.EINVAL)


def test_hash_ignores_context() -> None:
    """Errors that compare equal collapse in sets and dict keys."""
    found = {Error(errno.EINVAL, "first"), Error(errno.EINVAL, "second")}

    assert len(found) == 1
    assert hash(Error(ErrorCode.EXCEPTION, "x")) == hash(make_code(ErrorCode.EXCEPTION))


def test_ordering_follows_numeric_value() -> None:
    """Errors sort by code value; context never participates."""
    assert Error(errno.EACCES, "z") < Error(errno.EINVAL, "a")
    assert sorted([Error(errno.EINVAL), Error(errno.EPERM), Error(errno.EACCES)]) == [
        Error(errno.EPERM),
        Error(errno.EACCES),
        Error(errno.EINVAL),
    ]
    assert Error(errno.EINVAL) >= Error(errno.EINVAL, "other")


def test_comparison_with_plain_values_is_not_supported() -> None:
    """Integers are matched through ``is_``, not ``==``."""
    assert (Error(errno.EINVAL) == errno.EINVAL) is False
    with pytest.raises(TypeError):
        _ = Error(errno.EINVAL) < 5  # type: ignore[operator]


def test_is_matches_codes_and_conditions() -> None:
    """``is_`` compares resolved codes, or default conditions for conditions."""
    err = Error(ErrorCode.LENGTH_ERROR, "buffer")

    assert err.is_(ErrorCode.LENGTH_ERROR)
    assert err.is_(Error(ErrorCode.LENGTH_ERROR))
    assert err.is_(ErrorCondition.LOGIC_ERROR)
    assert not err.is_(ErrorCondition.RUNTIME_ERROR)
    assert not err.is_(ErrorCode.LOGIC_ERROR)
    assert Error(errno.EINVAL).is_(errno.EINVAL)
    assert not Error(errno.EINVAL).is_(ErrorCondition.LOGIC_ERROR)


def test_is_any_of_is_an_or_over_candidates() -> None:
    """Any single matching candidate is enough."""
    err = Error(errno.ENOENT)

    assert err.is_any_of(errno.EACCES, errno.ENOENT)
    assert not err.is_any_of(errno.EACCES, ErrorCondition.OTHER_ERROR)
    assert not err.is_any_of()


def test_with_context_prefixes_and_keeps_code() -> None:
    """Re-wrapping grows the context and preserves the code end to end."""
    err = Error(errno.ENOENT, "reading settings")
    wrapped = err.with_context("starting service")

    assert wrapped.context == "starting service: reading settings"
    assert wrapped.code is err.code
    assert Error(errno.ENOENT).with_context("outer").context == "outer"
    assert err.context == "reading settings"


def test_swap_exchanges_code_and_context() -> None:
    """Swapping returns the pair in reverse order."""
    left = Error(errno.EINVAL, "left")
    right = Error(ErrorCode.BAD_ALLOC, "right")

    left, right = swap(left, right)

    assert left.is_(ErrorCode.BAD_ALLOC)
    assert left.context == "right"
    assert right.is_(errno.EINVAL)
    assert right.context == "left"


def test_error_is_immutable() -> None:
    """Attributes cannot be rebound or deleted after construction."""
    err = Error(errno.EINVAL, "x")

    with pytest.raises(AttributeError):
        err.context = "y"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del err._code
    assert copy.copy(err) is err
    assert copy.deepcopy(err) is err


def test_repr_names_code_and_context() -> None:
    """The repr is useful in assertion output."""
    assert repr(Error(errno.EINVAL, "x")) == (
        "Error(code=Code(value=22, category='generic'), context='x')"
    )


@pytest.mark.parametrize("code", list(ErrorCode))
def test_every_error_code_round_trips_through_error(code: ErrorCode) -> None:
    """Constructing from a code keeps its value and its condition family."""
    err = Error(code, "context")

    assert err.value == int(code)
    assert err.is_(code)
    assert err.condition() in set(ErrorCondition)
    assert condition_of(code) is err.condition()


@pytest.mark.parametrize(
    "value", [errno.EPERM, errno.ENOENT, errno.EIO, errno.EACCES, errno.EINVAL, errno.ERANGE]
)
def test_errno_values_round_trip_through_error(value: int) -> None:
    """System codes keep their numeric value and generic category."""
    err = Error(value)

    assert err.value == value
    assert err.category.name == "generic"
    assert err.message() == os.strerror(value)
