"""A thread-safe fixed-size byte ring buffer."""

from __future__ import annotations

import threading


class RingBufferOverflow(OverflowError):
    """Raised when pushed data does not fit in the free space of the buffer."""


class RingBuffer:
    """Fixed-capacity FIFO of bytes with wrap-around storage."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"ring buffer size must be positive, got {size}")
        self.size = size
        self._buffer = bytearray(size)
        self._read_pos = 0
        self._write_pos = 0
        self._count = 0
        self._lock = threading.Lock()

    def push_data(self, data: bytes) -> None:
        """Append data; raise RingBufferOverflow if it would overwrite unread bytes."""
        data = bytes(data)
        n = len(data)
        with self._lock:
            if n > self.size - self._count:
                raise RingBufferOverflow("RingBuffer overflow")
            first = min(n, self.size - self._write_pos)
            self._buffer[self._write_pos:self._write_pos + first] = data[:first]
            self._buffer[:n - first] = data[first:]
            self._write_pos = (self._write_pos + n) % self.size
            self._count += n

    def read_data(self, size: int) -> bytes:
        """Return `size` bytes: up to the available data, zero-filled after it."""
        if size < 0:
            raise ValueError(f"cannot read a negative number of bytes: {size}")
        out = bytearray(size)
        with self._lock:
            n = min(self._count, size)
            first = min(n, self.size - self._read_pos)
            out[:first] = self._buffer[self._read_pos:self._read_pos + first]
            out[first:n] = self._buffer[:n - first]
            self._read_pos = (self._read_pos + n) % self.size
            self._count -= n
        return bytes(out)

    def reset(self) -> None:
        with self._lock:
            self._read_pos = 0
            self._write_pos = 0
            self._count = 0

    def available(self) -> int:
        with self._lock:
            return self._count