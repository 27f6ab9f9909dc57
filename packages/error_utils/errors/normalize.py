"""Exception classification into ``Error`` values.

``CLASSIFICATION_RULES`` is evaluated in order and the first rule whose kinds
match (by ``isinstance``) decides the code. Rules are listed most-specific
first: no rule's kinds may be a parent of a kind in a later rule, otherwise
the later rule could never fire.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import errno
import os
import re
from dataclasses import dataclass
from typing import Callable, Final

from .categories import Code, make_code
from .codes import ErrorCode, FutureErrc
from .exceptions import (
    AmbiguousLocalTimeError,
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
from .regex import classify_regex_error
from .types import Error

CodeResolver = Callable[[BaseException], Code]


@dataclass(frozen=True)
class ClassificationRule:
    """One ``(failure kinds -> code)`` entry of the classification table."""

    kinds: tuple[type[BaseException], ...]
    resolve: CodeResolver

    def matches(self, exc: BaseException) -> bool:
        return isinstance(exc, self.kinds)


def _fixed(code: ErrorCode | FutureErrc | int) -> CodeResolver:
    resolved = make_code(code)
    return lambda _exc: resolved


def _regex_code(exc: BaseException) -> Code:
    _detail, code = classify_regex_error(exc)  # type: ignore[arg-type]
    return code


def _future_code(exc: BaseException) -> Code:
    return make_code(exc.code)  # type: ignore[attr-defined]


# errno implied by OSError subclasses raised without an errno.
_OS_ERROR_ERRNO: Final[dict[type[OSError], int]] = {
    BlockingIOError: errno.EAGAIN,
    ChildProcessError: errno.ECHILD,
    BrokenPipeError: errno.EPIPE,
    ConnectionAbortedError: errno.ECONNABORTED,
    ConnectionRefusedError: errno.ECONNREFUSED,
    ConnectionResetError: errno.ECONNRESET,
    FileExistsError: errno.EEXIST,
    FileNotFoundError: errno.ENOENT,
    InterruptedError: errno.EINTR,
    IsADirectoryError: errno.EISDIR,
    NotADirectoryError: errno.ENOTDIR,
    PermissionError: errno.EACCES,
    ProcessLookupError: errno.ESRCH,
    TimeoutError: errno.ETIMEDOUT,
}


def _os_error_code(exc: BaseException) -> Code:
    value = getattr(exc, "errno", None)
    if isinstance(value, int) and value != 0:
        return make_code(value)
    for klass in type(exc).__mro__:
        implied = _OS_ERROR_ERRNO.get(klass)
        if implied is not None:
            return make_code(implied)
    return make_code(errno.EIO)


CLASSIFICATION_RULES: Final[tuple[ClassificationRule, ...]] = (
    # Access without value
    ClassificationRule((BadExpectedAccessError,), _fixed(ErrorCode.BAD_EXPECTED_ACCESS)),
    ClassificationRule((BadOptionalAccessError,), _fixed(ErrorCode.BAD_OPTIONAL_ACCESS)),
    ClassificationRule((BadVariantAccessError,), _fixed(ErrorCode.BAD_VARIANT_ACCESS)),
    ClassificationRule((ReferenceError,), _fixed(ErrorCode.BAD_WEAK_PTR)),
    ClassificationRule((BadFunctionCallError,), _fixed(ErrorCode.BAD_FUNCTION_CALL)),
    ClassificationRule((BadTypeidError,), _fixed(ErrorCode.BAD_TYPEID)),
    # Logic / argument
    ClassificationRule((LengthError,), _fixed(ErrorCode.LENGTH_ERROR)),
    ClassificationRule(
        (NonexistentLocalTimeError,), _fixed(ErrorCode.NONEXISTENT_LOCAL_TIME)
    ),
    ClassificationRule((AmbiguousLocalTimeError,), _fixed(ErrorCode.AMBIGUOUS_LOCAL_TIME)),
    ClassificationRule((FormatError,), _fixed(ErrorCode.FORMAT_ERROR)),
    ClassificationRule((re.error,), _regex_code),
    ClassificationRule((ValueError,), _fixed(ErrorCode.INVALID_ARGUMENT)),
    # Arithmetic
    ClassificationRule((ZeroDivisionError,), _fixed(errno.EDOM)),
    ClassificationRule((OverflowError,), _fixed(errno.EOVERFLOW)),
    ClassificationRule((UnderflowError,), _fixed(ErrorCode.VALUE_TOO_SMALL)),
    ClassificationRule((FloatingPointError,), _fixed(errno.ERANGE)),
    ClassificationRule((LookupError,), _fixed(errno.ERANGE)),
    # Futures and executors
    ClassificationRule((FutureError,), _future_code),
    ClassificationRule(
        (concurrent.futures.CancelledError, asyncio.CancelledError),
        _fixed(errno.ECANCELED),
    ),
    ClassificationRule(
        (concurrent.futures.InvalidStateError, asyncio.InvalidStateError),
        _fixed(FutureErrc.PROMISE_ALREADY_SATISFIED),
    ),
    ClassificationRule(
        (concurrent.futures.BrokenExecutor,), _fixed(FutureErrc.BROKEN_PROMISE)
    ),
    # System
    ClassificationRule((OSError,), _os_error_code),
    # Resource / type
    ClassificationRule((MemoryError,), _fixed(ErrorCode.BAD_ALLOC)),
    ClassificationRule((TypeError,), _fixed(ErrorCode.BAD_CAST)),
    # Generic logic / runtime, after every specific entry they would shadow
    ClassificationRule((AssertionError,), _fixed(ErrorCode.LOGIC_ERROR)),
    ClassificationRule((RuntimeError, ArithmeticError), _fixed(ErrorCode.RUNTIME_ERROR)),
    # Catch-all
    ClassificationRule((BadException,), _fixed(ErrorCode.BAD_EXCEPTION)),
    ClassificationRule((Exception,), _fixed(ErrorCode.EXCEPTION)),
    ClassificationRule((BaseException,), _fixed(ErrorCode.UNKNOWN_EXCEPTION)),
)


def classify_exception(exc: BaseException) -> Code:
    """Return the code of the first rule matching ``exc``."""
    for rule in CLASSIFICATION_RULES:
        if rule.matches(exc):
            return rule.resolve(exc)
    return make_code(ErrorCode.UNKNOWN_EXCEPTION)


def failure_text(exc: BaseException) -> str:
    """Return the descriptive text a failure contributes to an error context.

    An ``OSError`` with an errno contributes its filename(s), preceded by its
    own ``strerror`` when that differs from the platform text the errno
    message already carries.
    """
    if isinstance(exc, OSError) and isinstance(exc.errno, int):
        parts: list[str] = []
        if exc.strerror and exc.strerror != _platform_strerror(exc.errno):
            parts.append(exc.strerror)
        filenames = [name for name in (exc.filename, exc.filename2) if name is not None]
        if filenames:
            parts.append(" -> ".join(repr(name) for name in filenames))
        return ": ".join(parts)
    text = str(exc)
    return text if text else type(exc).__name__


def _platform_strerror(value: int) -> str | None:
    try:
        return os.strerror(value)
    except (ValueError, OverflowError):
        return None


def compose_context(context: str, text: str) -> str:
    """Join caller context and failure text as ``"{context}: {text}"``."""
    if context and text:
        return f"{context}: {text}"
    return context or text


def exception_to_error(
    exc: BaseException, context: str = "", *, chain_nested: bool = False
) -> Error:
    """Normalize an exception into an ``Error``.

    The exception itself is classified; an exception raised while handling
    another keeps only its own text unless ``chain_nested`` is set.
    """
    text = failure_text(exc)
    if chain_nested:
        inner = exc.__cause__ or exc.__context__
        if inner is not None:
            text = f"{text} (while handling: {failure_text(inner)})"
    return Error(classify_exception(exc), compose_context(context, text))
