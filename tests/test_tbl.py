import io
import struct

import pytest

from libabyss.tbl import read_tbl

HEADER_SIZE = 21
RECORD_SIZE = 17


def build_tbl(entries, unused=0, bad_offset=False, truncate=0):
    """entries: list of (index, key, value) strings."""
    num = len(entries)
    table_size = len(entries) + unused
    start = HEADER_SIZE + num * 2 + table_size * RECORD_SIZE
    data = bytearray()
    records = bytearray()
    for index, key, value in entries:
        key_off = start + len(data)
        data += key.encode() + b"\0"
        value_off = start + len(data)
        data += value.encode() + b"\0"
        if bad_offset:
            key_off = start + 10_000
        records += struct.pack("<BHIIIH", 1, index, 0, key_off, value_off, len(value.encode()) + 1)
    for _ in range(unused):
        records += struct.pack("<BHIIIH", 0, 0, 0, 0, 0, 0)
    end = start + len(data)
    header = struct.pack("<HHIBIII", 0, num, table_size, 1, start, 0, end)
    indices = b"".join(struct.pack("<H", i) for i in range(num))
    blob = header + indices + bytes(records) + bytes(data)
    return blob[:len(blob) - truncate] if truncate else blob


def test_reads_keys_and_indices():
    table = read_tbl(io.BytesIO(build_tbl([(3, "hello", "world"), (7, "key", "value")])))
    assert table["hello"] == "world"
    assert table["key"] == "value"
    assert table["#3"] == "world"
    assert table["#7"] == "value"
    assert len(table) == 4


def test_unused_records_skipped():
    table = read_tbl(io.BytesIO(build_tbl([(1, "a", "b")], unused=3)))
    assert table == {"a": "b", "#1": "b"}


def test_empty_value():
    table = read_tbl(io.BytesIO(build_tbl([(0, "empty", "")])))
    assert table["empty"] == ""


def test_invalid_offset_raises():
    with pytest.raises(ValueError, match="invalid offset"):
        read_tbl(io.BytesIO(build_tbl([(1, "a", "b")], bad_offset=True)))


def test_truncated_data_raises():
    with pytest.raises(ValueError, match="whole tbl data"):
        read_tbl(io.BytesIO(build_tbl([(1, "abc", "defg")], truncate=2)))