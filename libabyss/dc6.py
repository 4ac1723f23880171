"""DC6 sprite files: run-length encoded palette-indexed frames."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import BinaryIO

from libabyss.streamreader import StreamReader

_END_OF_SCANLINE = 0x80
_MAX_RUN_LENGTH = 0x7F


@dataclass
class DC6Frame:
    """One decoded frame; index_data holds width * height palette indices."""

    flipped: int = 0
    width: int = 0
    height: int = 0
    offset_x: int = 0
    offset_y: int = 0
    unknown: int = 0
    next_block: int = 0
    length: int = 0
    index_data: bytes = b""


@dataclass
class DC6Direction:
    frames: list[DC6Frame] = field(default_factory=list)


@dataclass
class DC6:
    version: int
    flags: int
    encoding: int
    termination: bytes
    number_of_directions: int
    frames_per_direction: int
    directions: list[DC6Direction] = field(default_factory=list)


def _decode_frame(reader: StreamReader, frame: DC6Frame) -> bytes:
    width, height, length = frame.width, frame.height, frame.length
    total = width * height
    pixels = bytearray(total)
    x = 0
    y = height - 1
    end_y = 0
    if frame.flipped:
        y, end_y = end_y, y
    dy = 1 if frame.flipped else -1
    offset = 0

    while True:
        if offset >= length:
            raise ValueError("Data overrun while decoding DC6 frame.")
        b = reader.read_uint8()
        offset += 1

        if b == _END_OF_SCANLINE:
            if y == end_y:
                break
            y += dy
            x = 0
        elif b & _END_OF_SCANLINE:
            x += b & _MAX_RUN_LENGTH
        elif b == 0:
            # Some files pad with zeros past the declared length.
            offset -= 1
        else:
            for i in range(b):
                if offset >= length:
                    raise ValueError("Data overrun while decoding DC6 frame.")
                position = x + y * width + i
                if not 0 <= position < total:
                    raise ValueError("X/Y position out of bounds while decoding DC6 frame.")
                pixels[position] = reader.read_uint8()
                offset += 1
            x += b

    if offset != length:
        raise ValueError("Invalid DC6 frame length.")
    return bytes(pixels)


def _read_frame(reader: StreamReader) -> DC6Frame:
    frame = DC6Frame(
        flipped=reader.read_uint32(),
        width=reader.read_uint32(),
        height=reader.read_uint32(),
        offset_x=reader.read_int32(),
        offset_y=reader.read_int32(),
        unknown=reader.read_uint32(),
        next_block=reader.read_uint32(),
        length=reader.read_uint32(),
    )
    frame.index_data = _decode_frame(reader, frame)
    return frame


def read_dc6(stream: BinaryIO) -> DC6:
    """Read and decode every frame of a DC6 sprite."""
    reader = StreamReader(stream)
    try:
        dc6 = DC6(
            version=reader.read_int32(),
            flags=reader.read_uint32(),
            encoding=reader.read_uint32(),
            termination=reader.read_bytes(4),
            number_of_directions=reader.read_uint32(),
            frames_per_direction=reader.read_uint32(),
        )
        total = dc6.number_of_directions * dc6.frames_per_direction
        pointers = iter([reader.read_uint32() for _ in range(total)])
        for _ in range(dc6.number_of_directions):
            direction = DC6Direction()
            for _ in range(dc6.frames_per_direction):
                reader.seek(next(pointers), io.SEEK_SET)
                direction.frames.append(_read_frame(reader))
            dc6.directions.append(direction)
    except EOFError as exc:
        raise ValueError("EOF while decoding DC6.") from exc
    return dc6