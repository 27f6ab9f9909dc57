"""Tests for the exception-classifying ``try_catch`` boundary."""

from __future__ import annotations

import errno
import logging

import pytest

from packages.error_utils.errors import (
    BadException,
    BadFunctionCallError,
    BadOptionalAccessError,
    Error,
    ErrorCode,
    FormatError,
    LengthError,
    UnderflowError,
    classify_exception,
)
from packages.error_utils.result import failure, try_catch

BOUNDARY_LOGGER = "packages.error_utils.result.boundaries"


def test_try_catch_returns_the_value_on_success() -> None:
    """A normal return becomes a success carrying the value."""
    result = try_catch(lambda: 40 + 2, "adding")

    assert result.ok
    assert result.value == 42


def test_try_catch_does_not_flatten_returned_results() -> None:
    """A Result returned by the operation is the success value itself."""
    inner = failure(Error(errno.EIO, "inner"))
    result = try_catch(lambda: inner)

    assert result.ok
    assert result.value is inner


def test_try_catch_classifies_and_composes_context() -> None:
    """The failure text is appended to the caller's context."""
    result = try_catch(lambda: int("eighty"), "parsing port")

    assert not result
    assert result.error.is_(ErrorCode.INVALID_ARGUMENT)
    assert result.error.context == (
        "parsing port: invalid literal for int() with base 10: 'eighty'"
    )


def test_try_catch_without_context_keeps_failure_text() -> None:
    """With no caller context, only the failure text is kept."""
    result = try_catch(lambda: {}["missing"])

    assert result.error.is_(errno.ERANGE)
    assert result.error.context == "'missing'"


def test_try_catch_classifies_api_misuse() -> None:
    """Reading the value of a failed Result is itself classifiable."""
    failed = failure(Error(errno.ENOENT, "lookup"))
    result = try_catch(lambda: failed.value, "reading")

    assert result.error.is_(ErrorCode.BAD_EXPECTED_ACCESS)


def test_try_catch_lets_interrupts_propagate_by_default() -> None:
    """KeyboardInterrupt and SystemExit are not swallowed."""

    def interrupted() -> None:
        raise KeyboardInterrupt

    def exiting() -> None:
        raise SystemExit(3)

    with pytest.raises(KeyboardInterrupt):
        try_catch(interrupted)
    with pytest.raises(SystemExit):
        try_catch(exiting)


def test_try_catch_classifies_interrupts_when_configured(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Disabling propagation turns interrupts into unknown exceptions."""
    monkeypatch.setenv("ERROR_UTILS_BOUNDARIES__PROPAGATE_INTERRUPTS", "false")

    def interrupted() -> None:
        raise KeyboardInterrupt

    result = try_catch(interrupted, "waiting")

    assert result.error.is_(ErrorCode.UNKNOWN_EXCEPTION)
    assert result.error.context == "waiting: KeyboardInterrupt"


def test_try_catch_chains_nested_failures_when_configured(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """The failure being handled is appended when chaining is enabled."""
    monkeypatch.setenv("ERROR_UTILS_BOUNDARIES__CHAIN_NESTED_FAILURES", "true")

    def cleanup_fails() -> None:
        try:
            raise OSError(errno.ENOSPC, "No space left on device", "/var/data")
        except OSError:
            raise RuntimeError("cleanup failed")

    result = try_catch(cleanup_fails, "saving")

    assert result.error.is_(ErrorCode.RUNTIME_ERROR)
    assert result.error.context == "saving: cleanup failed (while handling: '/var/data')"


def test_try_catch_logs_one_debug_record_per_failure(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Classified failures are logged with their classification fields."""
    caplog.set_level(logging.DEBUG, logger=BOUNDARY_LOGGER)

    try_catch(lambda: 1 / 0, "dividing")
    try_catch(lambda: 1, "fine")

    records = [record for record in caplog.records if record.name == BOUNDARY_LOGGER]
    assert len(records) == 1
    record = records[0]
    assert record.levelno == logging.DEBUG
    assert record.boundary == "try_catch"
    assert record.error_code == errno.EDOM
    assert record.error_category == "generic"
    assert record.exception_type == "ZeroDivisionError"


def test_try_catch_logging_can_be_disabled(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """No record is emitted when classification logging is off."""
    monkeypatch.setenv("ERROR_UTILS_BOUNDARIES__LOG_CLASSIFIED_FAILURES", "false")
    caplog.set_level(logging.DEBUG, logger=BOUNDARY_LOGGER)

    result = try_catch(lambda: 1 / 0)

    assert not result
    assert [r for r in caplog.records if r.name == BOUNDARY_LOGGER] == []


@pytest.mark.parametrize(
    "kind",
    [
        LengthError,
        FormatError,
        UnderflowError,
        BadOptionalAccessError,
        BadFunctionCallError,
        BadException,
        ValueError,
        LookupError,
        RuntimeError,
        TypeError,
        Exception,
    ],
)
def test_try_catch_classifies_the_same_failure_the_same_way(
    kind: type[Exception],
) -> None:
    """Raising one kind with one message twice yields equal errors."""

    def raises() -> None:
        raise kind("same message")

    first = try_catch(raises, "step")
    second = try_catch(raises, "step")

    assert first.error == second.error
    assert first.error.code == classify_exception(kind("same message"))
    assert first.error.context == second.error.context == "step: same message"
