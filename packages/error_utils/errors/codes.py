"""Error code and error condition registries.

Codes are the stable, machine-comparable identities of specific failures.
Conditions are the coarse groups those codes roll up into. Both tables are
read-only for the life of the process; adding a new ``ErrorCode`` member
requires adding its ``CODE_TABLE`` row, including its condition.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping

# Value reserved for "no error" in every category.
SUCCESS_VALUE: Final[int] = 0


class ErrorCondition(IntEnum):
    """Coarse failure groups shared by every ``ErrorCode``."""

    LOGIC_ERROR = 1
    RUNTIME_ERROR = 2
    RESOURCE_ERROR = 3
    ACCESS_ERROR = 4
    OTHER_ERROR = 5


class ErrorCode(IntEnum):
    """Specific failure identities produced by the classification boundary."""

    # Logic
    INVALID_ARGUMENT = 1
    LENGTH_ERROR = 2
    LOGIC_ERROR = 3

    # Runtime
    VALUE_TOO_SMALL = 4
    NONEXISTENT_LOCAL_TIME = 5
    AMBIGUOUS_LOCAL_TIME = 6
    FORMAT_ERROR = 7
    RUNTIME_ERROR = 8

    # Resource / type
    BAD_ALLOC = 9
    BAD_TYPEID = 10
    BAD_CAST = 11

    # Access without value
    BAD_OPTIONAL_ACCESS = 12
    BAD_EXPECTED_ACCESS = 13
    BAD_VARIANT_ACCESS = 14
    BAD_WEAK_PTR = 15
    BAD_FUNCTION_CALL = 16

    # Catch-all
    BAD_EXCEPTION = 17
    EXCEPTION = 18
    UNKNOWN_EXCEPTION = 19
    UNKNOWN_ERROR = 20


class FutureErrc(IntEnum):
    """Failure identities carried by future/executor failures."""

    BROKEN_PROMISE = 1
    FUTURE_ALREADY_RETRIEVED = 2
    PROMISE_ALREADY_SATISFIED = 3
    NO_STATE = 4


@dataclass(frozen=True)
class CodeInfo:
    """Registry row describing one ``ErrorCode``."""

    message: str
    condition: ErrorCondition


CODE_TABLE: Final[Mapping[ErrorCode, CodeInfo]] = MappingProxyType(
    {
        ErrorCode.INVALID_ARGUMENT: CodeInfo(
            "Invalid argument exception", ErrorCondition.LOGIC_ERROR
        ),
        ErrorCode.LENGTH_ERROR: CodeInfo(
            "Length error exception", ErrorCondition.LOGIC_ERROR
        ),
        ErrorCode.LOGIC_ERROR: CodeInfo(
            "Logic error exception", ErrorCondition.LOGIC_ERROR
        ),
        ErrorCode.VALUE_TOO_SMALL: CodeInfo(
            "Value too small (underflow exception)", ErrorCondition.RUNTIME_ERROR
        ),
        ErrorCode.NONEXISTENT_LOCAL_TIME: CodeInfo(
            "Nonexistent local time exception", ErrorCondition.RUNTIME_ERROR
        ),
        ErrorCode.AMBIGUOUS_LOCAL_TIME: CodeInfo(
            "Ambiguous local time exception", ErrorCondition.RUNTIME_ERROR
        ),
        ErrorCode.FORMAT_ERROR: CodeInfo(
            "Format error exception", ErrorCondition.RUNTIME_ERROR
        ),
        ErrorCode.RUNTIME_ERROR: CodeInfo(
            "Runtime error exception", ErrorCondition.RUNTIME_ERROR
        ),
        ErrorCode.BAD_ALLOC: CodeInfo(
            "Bad allocation exception", ErrorCondition.RESOURCE_ERROR
        ),
        ErrorCode.BAD_TYPEID: CodeInfo(
            "Bad typeid exception", ErrorCondition.RESOURCE_ERROR
        ),
        ErrorCode.BAD_CAST: CodeInfo("Bad cast exception", ErrorCondition.RESOURCE_ERROR),
        ErrorCode.BAD_OPTIONAL_ACCESS: CodeInfo(
            "Bad optional access exception", ErrorCondition.ACCESS_ERROR
        ),
        ErrorCode.BAD_EXPECTED_ACCESS: CodeInfo(
            "Bad expected access exception", ErrorCondition.ACCESS_ERROR
        ),
        ErrorCode.BAD_VARIANT_ACCESS: CodeInfo(
            "Bad variant access exception", ErrorCondition.ACCESS_ERROR
        ),
        ErrorCode.BAD_WEAK_PTR: CodeInfo(
            "Bad weak pointer exception", ErrorCondition.ACCESS_ERROR
        ),
        ErrorCode.BAD_FUNCTION_CALL: CodeInfo(
            "Bad function call exception", ErrorCondition.ACCESS_ERROR
        ),
        ErrorCode.BAD_EXCEPTION: CodeInfo("Bad exception", ErrorCondition.OTHER_ERROR),
        ErrorCode.EXCEPTION: CodeInfo("Exception caught", ErrorCondition.OTHER_ERROR),
        ErrorCode.UNKNOWN_EXCEPTION: CodeInfo(
            "Unknown exception caught", ErrorCondition.OTHER_ERROR
        ),
        ErrorCode.UNKNOWN_ERROR: CodeInfo("Unknown error", ErrorCondition.OTHER_ERROR),
    }
)

CONDITION_MESSAGES: Final[Mapping[ErrorCondition, str]] = MappingProxyType(
    {
        ErrorCondition.LOGIC_ERROR: "Logic error",
        ErrorCondition.RUNTIME_ERROR: "Runtime error",
        ErrorCondition.RESOURCE_ERROR: "Resource error",
        ErrorCondition.ACCESS_ERROR: "Access error",
        ErrorCondition.OTHER_ERROR: "Other error",
    }
)

FUTURE_MESSAGES: Final[Mapping[FutureErrc, str]] = MappingProxyType(
    {
        FutureErrc.BROKEN_PROMISE: "Broken promise",
        FutureErrc.FUTURE_ALREADY_RETRIEVED: "Future already retrieved",
        FutureErrc.PROMISE_ALREADY_SATISFIED: "Promise already satisfied",
        FutureErrc.NO_STATE: "No associated state",
    }
)

UNRECOGNIZED_CODE_MESSAGE: Final[str] = "Unrecognized error code"
UNRECOGNIZED_CONDITION_MESSAGE: Final[str] = "Unrecognized error condition"
UNRECOGNIZED_FUTURE_MESSAGE: Final[str] = "Unrecognized future error"
UNRECOGNIZED_SYSTEM_MESSAGE: Final[str] = "Unrecognized system error"
