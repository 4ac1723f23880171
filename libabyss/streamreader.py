"""Little-endian binary reading over seekable byte streams."""

from __future__ import annotations

import io
from typing import BinaryIO


def stream_size(stream: BinaryIO) -> int:
    """Return the total size of a seekable stream, leaving its position unchanged."""
    current = stream.tell()
    stream.seek(0, io.SEEK_END)
    end = stream.tell()
    stream.seek(current, io.SEEK_SET)
    return end


class StreamReader:
    """Reads little-endian integers, raw bytes and NUL-terminated strings."""

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def read_byte(self) -> int:
        data = self.stream.read(1)
        if not data:
            raise EOFError("unexpected end of stream")
        return data[0]

    def read_bytes(self, count: int) -> bytes:
        if count < 0:
            raise ValueError(f"cannot read a negative number of bytes: {count}")
        if count == 0:
            return b""
        data = self.stream.read(count)
        if len(data) != count:
            raise EOFError(f"expected {count} bytes, got {len(data)}")
        return bytes(data)

    def _read_int(self, size: int, signed: bool) -> int:
        return int.from_bytes(self.read_bytes(size), "little", signed=signed)

    def read_uint8(self) -> int:
        return self._read_int(1, False)

    def read_int8(self) -> int:
        return self._read_int(1, True)

    def read_uint16(self) -> int:
        return self._read_int(2, False)

    def read_int16(self) -> int:
        return self._read_int(2, True)

    def read_uint32(self) -> int:
        return self._read_int(4, False)

    def read_int32(self) -> int:
        return self._read_int(4, True)

    def read_uint64(self) -> int:
        return self._read_int(8, False)

    def read_int64(self) -> int:
        return self._read_int(8, True)

    def read_string(self) -> str:
        """Read bytes up to (and consuming) a NUL terminator."""
        collected = bytearray()
        while (byte := self.read_byte()) != 0:
            collected.append(byte)
        return collected.decode("latin-1")

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self.stream.seek(offset, whence)
        return self.stream.tell()

    def tell(self) -> int:
        return self.stream.tell()