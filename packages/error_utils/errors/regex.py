"""Mapping of ``re`` compilation failures onto error codes."""

from __future__ import annotations

import errno
import re
from typing import Final

from .categories import Code, make_code

UNKNOWN_REGEX_DETAIL: Final[str] = "Regex error: unknown error"

# First matching fragment wins.
_REGEX_RULES: Final[tuple[tuple[tuple[str, ...], str, int], ...]] = (
    (
        ("unterminated character set",),
        "Regex error: mismatched square brackets ('[' and ']')",
        errno.EINVAL,
    ),
    (
        ("missing )", "unbalanced parenthesis", "unterminated subpattern"),
        "Regex error: mismatched parentheses ('(' and ')')",
        errno.EINVAL,
    ),
    (
        ("bad escape",),
        "Regex error: invalid escaped character or a trailing escape",
        errno.EINVAL,
    ),
    (
        ("bad character range",),
        "Regex error: invalid character range",
        errno.EINVAL,
    ),
    (
        ("nothing to repeat", "multiple repeat"),
        "Regex error: '*', '?', '+' or '{' was not preceded by a valid regular expression",
        errno.EINVAL,
    ),
    (
        ("invalid group reference", "unknown group name"),
        "Regex error: invalid back reference",
        errno.EINVAL,
    ),
    (
        ("min repeat greater than max repeat", "repetition number is too large"),
        "Regex error: invalid range in a {} expression",
        errno.EINVAL,
    ),
    (
        ("bad character in group name", "missing group name", "unknown extension"),
        "Regex error: invalid character class name",
        errno.EINVAL,
    ),
)


def classify_regex_error(exc: re.error | str) -> tuple[str, Code]:
    """Return ``(detail, code)`` for a regex compilation failure.

    ``exc`` may be the ``re.error`` itself or its bare message. Messages with
    no known fragment are still invalid patterns and map to ``EINVAL``.
    """
    raw = exc if isinstance(exc, str) else (getattr(exc, "msg", None) or str(exc))
    for fragments, detail, code in _REGEX_RULES:
        if any(fragment in raw for fragment in fragments):
            return detail, make_code(code)
    return UNKNOWN_REGEX_DETAIL, make_code(errno.EINVAL)
