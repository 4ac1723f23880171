import io
import struct

import pytest

from libabyss.dc6 import read_dc6


def build_dc6(frames, directions=1):
    """frames: list of (flipped, width, height, encoded, length) per frame."""
    header = struct.pack("<iII", 6, 1, 0) + b"\xee\xee\xee\xee"
    header += struct.pack("<II", directions, len(frames) // directions)
    body = bytearray()
    pointers = []
    base = len(header) + 4 * len(frames)
    for flipped, width, height, encoded, length in frames:
        pointers.append(base + len(body))
        body += struct.pack("<IIIiiIII", flipped, width, height, -3, 4, 0, 0, length)
        body += encoded
    return header + b"".join(struct.pack("<I", p) for p in pointers) + bytes(body)


ENCODED = bytes([2, 5, 6, 0x80, 2, 7, 8, 0x80])


def test_header_fields():
    dc6 = read_dc6(io.BytesIO(build_dc6([(0, 2, 2, ENCODED, len(ENCODED))])))
    assert dc6.version == 6
    assert dc6.flags == 1
    assert dc6.termination == b"\xee\xee\xee\xee"
    assert dc6.number_of_directions == 1
    assert dc6.frames_per_direction == 1
    frame = dc6.directions[0].frames[0]
    assert (frame.width, frame.height, frame.offset_x, frame.offset_y) == (2, 2, -3, 4)


def test_unflipped_frame_is_drawn_bottom_up():
    dc6 = read_dc6(io.BytesIO(build_dc6([(0, 2, 2, ENCODED, len(ENCODED))])))
    assert dc6.directions[0].frames[0].index_data == bytes([7, 8, 5, 6])


def test_flipped_frame_is_drawn_top_down():
    dc6 = read_dc6(io.BytesIO(build_dc6([(1, 2, 2, ENCODED, len(ENCODED))])))
    assert dc6.directions[0].frames[0].index_data == bytes([5, 6, 7, 8])


def test_transparent_run_skips_pixels():
    encoded = bytes([0x81, 1, 9, 0x80])
    dc6 = read_dc6(io.BytesIO(build_dc6([(0, 2, 1, encoded, len(encoded))])))
    assert dc6.directions[0].frames[0].index_data == bytes([0, 9])


def test_multiple_directions():
    frames = [(0, 2, 2, ENCODED, len(ENCODED)), (1, 2, 2, ENCODED, len(ENCODED))]
    dc6 = read_dc6(io.BytesIO(build_dc6(frames, directions=2)))
    assert len(dc6.directions) == 2
    assert dc6.directions[0].frames[0].index_data == bytes([7, 8, 5, 6])
    assert dc6.directions[1].frames[0].index_data == bytes([5, 6, 7, 8])


def test_wrong_length_raises():
    data = build_dc6([(0, 2, 2, ENCODED + b"\0\0", len(ENCODED) + 1)])
    with pytest.raises(ValueError, match="Invalid DC6 frame length"):
        read_dc6(io.BytesIO(data))


def test_overrun_raises():
    with pytest.raises(ValueError, match="Data overrun"):
        read_dc6(io.BytesIO(build_dc6([(0, 2, 2, ENCODED, 2)])))


def test_out_of_bounds_raises():
    encoded = bytes([3, 1, 2, 3, 0x80])
    with pytest.raises(ValueError, match="out of bounds"):
        read_dc6(io.BytesIO(build_dc6([(0, 2, 1, encoded, len(encoded))])))


def test_truncated_raises():
    data = build_dc6([(0, 2, 2, ENCODED, len(ENCODED))])
    with pytest.raises(ValueError, match="EOF"):
        read_dc6(io.BytesIO(data[:-3]))