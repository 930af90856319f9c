"""Writing characters, strings and numbers straight to file descriptors.

Each function returns the number of bytes it wrote. A negative descriptor
or a missing string writes nothing and returns 0.
"""

from __future__ import annotations

import os
from typing import Optional

ENCODING = "utf-8"


def _write_all(fd: int, data: bytes) -> int:
    """Write all of ``data`` to ``fd``, retrying after short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def put_char_fd(c: str, fd: int) -> int:
    """Write the single character ``c`` to ``fd``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    if fd < 0:
        return 0
    return _write_all(fd, c.encode(ENCODING))


def put_str_fd(text: Optional[str], fd: int) -> int:
    """Write ``text`` to ``fd``."""
    if text is None or fd < 0:
        return 0
    return _write_all(fd, text.encode(ENCODING))


def put_endl_fd(text: Optional[str], fd: int) -> int:
    """Write ``text`` followed by a newline to ``fd``."""
    if text is None or fd < 0:
        return 0
    return _write_all(fd, (text + "\n").encode(ENCODING))


def put_nbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of ``n`` to ``fd``, with a minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    if fd < 0:
        return 0
    return _write_all(fd, str(n).encode(ENCODING))