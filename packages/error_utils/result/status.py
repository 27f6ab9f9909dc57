"""Side-channel status flags (errno equivalents).

Legacy-style APIs report failure out of band: the return value says *that*
something failed, a status flag says *what*. Boundaries clear the flag before
the wrapped call and read it afterwards. Neither implementation locks: a flag
is per-thread, and a wrapped call must not re-enter a boundary sharing the
same flag.
"""

from __future__ import annotations

import ctypes
import threading
from typing import Final, Protocol

from packages.error_utils.errors import Code, make_code


class StatusFlag(Protocol):
    """Read/write access to one errno-style status cell."""

    def get(self) -> int: ...

    def set(self, value: int) -> None: ...


class CtypesErrno:
    """The C ``errno`` as seen through ``ctypes``.

    Foreign functions loaded with ``use_errno=True`` swap this thread-local
    copy with the real ``errno`` around each call, so clearing it here clears
    what the C function starts from, and reading it afterwards reads what the
    C function left behind.
    """

    def get(self) -> int:
        return ctypes.get_errno()

    def set(self, value: int) -> None:
        ctypes.set_errno(int(value))

    def __repr__(self) -> str:
        return "CtypesErrno()"


class LocalStatusFlag:
    """A thread-local status cell for pure-Python APIs."""

    def __init__(self) -> None:
        self._local = threading.local()

    def get(self) -> int:
        return getattr(self._local, "value", 0)

    def set(self, value: int) -> None:
        self._local.value = int(value)


ERRNO: Final[StatusFlag] = CtypesErrno()


def last_error(flag: StatusFlag = ERRNO) -> Code:
    """Return the flag's current value as an errno ``Code`` and clear it."""
    value = flag.get()
    flag.set(0)
    return make_code(value)
