"""String table (.tbl) files."""

from __future__ import annotations

import io
from typing import BinaryIO

from libabyss.streamreader import StreamReader


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def read_tbl(stream: BinaryIO) -> dict[str, str]:
    """Read a string table; each entry is keyed by its name and by '#<index>'."""
    reader = StreamReader(stream)
    reader.read_uint16()  # crc
    num_indices = reader.read_uint16()
    hash_table_size = reader.read_uint32()
    reader.read_uint8()  # version
    offset_start = reader.read_uint32()
    reader.read_uint32()  # max tries
    offset_end = reader.read_uint32()
    for _ in range(num_indices):
        reader.read_uint16()

    records = []
    for _ in range(hash_table_size):
        used = reader.read_uint8()
        index = reader.read_uint16()
        reader.read_uint32()  # hash
        key_offset = reader.read_uint32()
        value_offset = reader.read_uint32()
        value_len = reader.read_uint16()
        records.append((used, index, key_offset, value_offset, value_len))

    if offset_end < offset_start:
        raise ValueError("Couldn't read the whole tbl data")
    stream.seek(offset_start, io.SEEK_SET)
    raw = stream.read(offset_end - offset_start)
    if len(raw) != offset_end - offset_start:
        raise ValueError("Couldn't read the whole tbl data")

    result: dict[str, str] = {}
    for used, index, key_offset, value_offset, value_len in records:
        if not used:
            continue
        if not (offset_start <= key_offset < offset_end
                and offset_start <= value_offset < offset_end):
            raise ValueError("invalid offset in tbl record")
        key_raw = raw[key_offset - offset_start:]
        nul = key_raw.find(b"\0")
        if nul >= 0:
            key_raw = key_raw[:nul]
        value_raw = raw[value_offset - offset_start:]
        if value_len > 0:
            value_raw = value_raw[:value_len - 1]
        value = _decode(value_raw)
        result[_decode(key_raw)] = value
        result[f"#{index}"] = value
    return result