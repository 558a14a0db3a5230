"""Append-only writer over a caller-owned, fixed-size buffer."""
from __future__ import annotations

from .exceptions import BufferOverflowError


class BoundedWriter:
    """Cursor over a fixed byte region.

    The writer never grows the underlying buffer. Every write first checks
    that enough capacity remains and raises BufferOverflowError otherwise.
    After an overflow the buffer contents must be discarded.
    """

    def __init__(self, buffer: bytearray | memoryview, offset: int = 0) -> None:
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError("BoundedWriter needs a writable buffer")
        if not 0 <= offset <= len(view):
            raise ValueError(f"Offset {offset} outside buffer of {len(view)} bytes")
        self._view = view[offset:]
        self.length = 0

    @property
    def capacity(self) -> int:
        return len(self._view)

    @property
    def remaining(self) -> int:
        return self.capacity - self.length

    def check_remaining_capacity(self, needed: int) -> None:
        if self.remaining < needed:
            raise BufferOverflowError(needed, self.remaining)

    def push(self, value: int) -> None:
        """Append a single byte."""
        self.check_remaining_capacity(1)
        self._view[self.length] = value
        self.length += 1

    def extend(self, data: bytes | bytearray | memoryview) -> None:
        """Append a run of bytes."""
        size = len(data)
        self.check_remaining_capacity(size)
        self._view[self.length : self.length + size] = data
        self.length += size

    def getvalue(self) -> bytes:
        """Copy of the bytes written so far."""
        return bytes(self._view[: self.length])
