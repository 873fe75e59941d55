"""Line-by-line reading from file descriptors with a per-descriptor buffer."""

from __future__ import annotations

import os

BUFFER_SIZE = 32
MAX_FD = 1024


class LineReader:
    """Reads lines from raw file descriptors, keeping leftovers between calls."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int) -> bytes | None:
        """Return the next line from ``fd``, newline included, or None at end.

        The last line of the input may lack a newline. A read error
        discards any buffered data for ``fd`` and is raised.
        """
        if not 0 <= fd < MAX_FD:
            raise ValueError(f"file descriptor {fd} out of range")
        data = self._pending.pop(fd, b"")
        try:
            while b"\n" not in data:
                chunk = os.read(fd, self.buffer_size)
                if not chunk:
                    break
                data += chunk
        except OSError:
            raise
        if not data:
            return None
        end = data.find(b"\n")
        cut = len(data) if end < 0 else end + 1
        line, rest = data[:cut], data[cut:]
        if rest:
            self._pending[fd] = rest
        return line


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """Read the next line from ``fd`` using a shared reader."""
    return _default_reader.read_line(fd)