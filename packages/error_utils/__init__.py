"""Uniform error values, exception classification and ``Result`` boundaries.

Typical use::

    from packages.error_utils import try_catch

    result = try_catch(lambda: int(raw), "parsing port")
    if not result:
        log.warning("%s", result.error)
"""

from .errors import (
    Code,
    Error,
    ErrorCategory,
    ErrorCode,
    ErrorCondition,
    FutureErrc,
    exception_to_error,
    generic_category,
    make_code,
    swap,
)
from .result import (
    ERRNO,
    BoolResult,
    IntResult,
    LocalStatusFlag,
    Result,
    StringResult,
    VoidResult,
    failure,
    first_of,
    invoke_with_syscall_api,
    make_error,
    make_error_from_errno,
    make_regex_error,
    success,
    try_catch,
    with_errno,
)

__all__ = [
    "BoolResult",
    "Code",
    "ERRNO",
    "Error",
    "ErrorCategory",
    "ErrorCode",
    "ErrorCondition",
    "FutureErrc",
    "IntResult",
    "LocalStatusFlag",
    "Result",
    "StringResult",
    "VoidResult",
    "exception_to_error",
    "failure",
    "first_of",
    "generic_category",
    "invoke_with_syscall_api",
    "make_code",
    "make_error",
    "make_error_from_errno",
    "make_regex_error",
    "success",
    "swap",
    "try_catch",
    "with_errno",
]
