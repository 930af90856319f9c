"""Reading a file descriptor one line at a time.

A line is returned as bytes and keeps its terminating newline. The last
line of the input is returned without one when the input does not end
in a newline. ``None`` means that nothing is left to read.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 42


class LineReader:
    """Read newline-terminated lines from a descriptor in fixed-size chunks.

    Bytes read past the end of a line are kept for the next call. After
    the end of input is reached, a later call reads again, so a terminal
    or pipe that delivers more data afterwards is followed.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    @property
    def fd(self) -> int:
        """The descriptor being read."""
        return self._fd

    @property
    def buffer_size(self) -> int:
        """How many bytes each read asks for."""
        return self._buffer_size

    def _fill(self) -> None:
        """Read until a newline is buffered or the input ends."""
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self._fd, self._buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None when the input is exhausted.

        Raises OSError when the descriptor cannot be read; any buffered
        bytes are discarded in that case.
        """
        self._fill()
        if not self._pending:
            return None
        index = self._pending.find(b"\n")
        end = len(self._pending) if index < 0 else index + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line