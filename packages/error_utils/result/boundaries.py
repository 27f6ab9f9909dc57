"""Boundaries that turn raised failures and status flags into ``Result`` values.

``try_catch`` is the exception boundary: nothing the wrapped operation raises
escapes it, apart from interpreter exits when configured to let them through.
``with_errno`` and ``invoke_with_syscall_api`` are status-flag boundaries for
APIs that report failure through an errno-style side channel.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from packages.error_utils.config import get_settings
from packages.error_utils.errors import Error, exception_to_error
from packages.error_utils.logging import fields, get_logger

from .builders import failure, make_error_from_errno, success
from .result import Result
from .status import ERRNO, StatusFlag

T = TypeVar("T")

_LOGGER = get_logger(__name__)
_INTERRUPTS: tuple[type[BaseException], ...] = (KeyboardInterrupt, SystemExit)


def try_catch(operation: Callable[[], T], context: str = "") -> Result[T]:
    """Run ``operation`` and classify anything it raises.

    A returned value becomes a success as-is, including a ``Result``, which
    is not flattened.

    ``KeyboardInterrupt`` and ``SystemExit`` are the one exception to never
    re-raising: with ``boundaries.propagate_interrupts`` on (the default)
    they escape so Ctrl-C and ``sys.exit`` keep working. Turn it off to have
    them classified as ``UNKNOWN_EXCEPTION`` like any other failure.
    """
    options = get_settings().boundaries
    try:
        value = operation()
    except BaseException as exc:
        if options.propagate_interrupts and isinstance(exc, _INTERRUPTS):
            raise
        error = exception_to_error(
            exc, context, chain_nested=options.chain_nested_failures
        )
        if options.log_classified_failures:
            _log_classified(exc, error, boundary="try_catch")
        return failure(error)
    return success(value)


def with_errno(
    operation: Callable[[], T], context: str = "", *, flag: StatusFlag = ERRNO
) -> Result[T]:
    """Run ``operation`` and fail if it leaves the status flag set.

    The flag is cleared before the call and is clear again on return.
    Exceptions raised by ``operation`` propagate.
    """
    flag.set(0)
    value = operation()
    if flag.get() != 0:
        return make_error_from_errno(context, flag=flag)
    return success(value)


def invoke_with_syscall_api(
    operation: Callable[[], Any],
    context: str = "",
    *,
    flag: StatusFlag = ERRNO,
    sentinel: int = -1,
) -> Result[int]:
    """Run a syscall-style ``operation`` that returns ``sentinel`` on failure.

    On the failure path the status flag names the error; a flag left unset
    yields ``UNKNOWN_ERROR``. Any other return value is a success carrying it
    as an ``int``.
    """
    flag.set(0)
    value = operation()
    if value == sentinel:
        return make_error_from_errno(context, flag=flag)
    return success(int(value))


def _log_classified(exc: BaseException, error: Error, *, boundary: str) -> None:
    _LOGGER.debug(
        "classified failure: %s",
        error.context,
        extra={
            fields.BOUNDARY: boundary,
            fields.ERROR_CODE: error.value,
            fields.ERROR_CATEGORY: error.category.name,
            fields.EXCEPTION_TYPE: type(exc).__name__,
        },
    )
