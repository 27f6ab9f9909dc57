"""Error taxonomy, categories and the ``Error`` value type."""

from . import codes
from .categories import (
    Code,
    CodeLike,
    ErrorCategory,
    condition_of,
    error_code_category,
    error_condition_category,
    future_category,
    generic_category,
    make_code,
    register_category,
    success_code,
)
from .codes import ErrorCode, ErrorCondition, FutureErrc
from .exceptions import (
    AmbiguousLocalTimeError,
    BadAccessError,
    BadException,
    BadExpectedAccessError,
    BadFunctionCallError,
    BadOptionalAccessError,
    BadTypeidError,
    BadVariantAccessError,
    FormatError,
    FutureError,
    LengthError,
    NonexistentLocalTimeError,
    UnderflowError,
)
from .normalize import (
    CLASSIFICATION_RULES,
    ClassificationRule,
    classify_exception,
    compose_context,
    exception_to_error,
    failure_text,
)
from .regex import classify_regex_error
from .types import Error, ErrorLike, swap

__all__ = [
    "AmbiguousLocalTimeError",
    "BadAccessError",
    "BadException",
    "BadExpectedAccessError",
    "BadFunctionCallError",
    "BadOptionalAccessError",
    "BadTypeidError",
    "BadVariantAccessError",
    "CLASSIFICATION_RULES",
    "ClassificationRule",
    "Code",
    "CodeLike",
    "Error",
    "ErrorCategory",
    "ErrorCode",
    "ErrorCondition",
    "ErrorLike",
    "FormatError",
    "FutureErrc",
    "FutureError",
    "LengthError",
    "NonexistentLocalTimeError",
    "UnderflowError",
    "classify_exception",
    "classify_regex_error",
    "codes",
    "compose_context",
    "condition_of",
    "error_code_category",
    "error_condition_category",
    "exception_to_error",
    "failure_text",
    "future_category",
    "generic_category",
    "make_code",
    "register_category",
    "success_code",
    "swap",
]
