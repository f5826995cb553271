"""Line-by-line reading from a stream or file descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Optional, Union

DEFAULT_BUFFER_SIZE = 1

Chunk = Union[str, bytes]


class LineReader:
    """Reads one line at a time, keeping what was read past the line.

    ``source`` is either an open file descriptor or an object with a
    ``read(size)`` method.  Lines keep their trailing newline; the last line
    of the input may lack one.
    """

    def __init__(self, source: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(source, int) and source < 0:
            raise ValueError("file descriptor must not be negative")
        self._source = source
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def _read(self) -> Chunk:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    def readline(self) -> Optional[Chunk]:
        """Return the next line, or None once the input is exhausted."""
        while True:
            pending = self._pending
            if pending:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)
                if index >= 0:
                    line, self._pending = pending[: index + 1], pending[index + 1:]
                    return line
            chunk = self._read()
            if not chunk:
                self._pending = None
                return pending if pending else None
            self._pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.readline()) is not None:
            yield line