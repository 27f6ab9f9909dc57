"""Result values and the boundaries that produce them."""

from .boundaries import invoke_with_syscall_api, try_catch, with_errno
from .builders import (
    failure,
    make_error,
    make_error_from_errno,
    make_regex_error,
    success,
)
from .combinators import first_of
from .result import BoolResult, IntResult, Result, StringResult, VoidResult
from .status import ERRNO, CtypesErrno, LocalStatusFlag, StatusFlag, last_error

__all__ = [
    "BoolResult",
    "CtypesErrno",
    "ERRNO",
    "IntResult",
    "LocalStatusFlag",
    "Result",
    "StatusFlag",
    "StringResult",
    "VoidResult",
    "failure",
    "first_of",
    "invoke_with_syscall_api",
    "last_error",
    "make_error",
    "make_error_from_errno",
    "make_regex_error",
    "success",
    "try_catch",
    "with_errno",
]
