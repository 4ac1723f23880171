import threading

import pytest

from libabyss.ringbuffer import RingBuffer, RingBufferOverflow


def test_push_then_read_round_trip():
    rb = RingBuffer(16)
    rb.push_data(b"hello")
    assert rb.available() == 5
    assert rb.read_data(5) == b"hello"
    assert rb.available() == 0


def test_wrap_around():
    rb = RingBuffer(4)
    rb.push_data(b"abc")
    assert rb.read_data(2) == b"ab"
    rb.push_data(b"def")
    assert rb.available() == 4
    assert rb.read_data(4) == b"cdef"


def test_overflow_raises_and_keeps_contents():
    rb = RingBuffer(4)
    rb.push_data(b"abc")
    with pytest.raises(RingBufferOverflow):
        rb.push_data(b"de")
    assert rb.available() == 3
    assert rb.read_data(3) == b"abc"


def test_overflow_is_overflow_error():
    rb = RingBuffer(2)
    with pytest.raises(OverflowError):
        rb.push_data(b"xyz")


def test_short_read_is_zero_filled():
    rb = RingBuffer(8)
    rb.push_data(b"xy")
    assert rb.read_data(4) == b"xy\x00\x00"
    assert rb.available() == 0
    assert rb.read_data(3) == b"\x00\x00\x00"


def test_read_zero_bytes_consumes_nothing():
    rb = RingBuffer(8)
    rb.push_data(b"q")
    assert rb.read_data(0) == b""
    assert rb.available() == 1


def test_reset_discards_data():
    rb = RingBuffer(8)
    rb.push_data(b"1234")
    rb.reset()
    assert rb.available() == 0
    rb.push_data(b"zz")
    assert rb.read_data(2) == b"zz"


def test_fill_to_capacity_many_times():
    rb = RingBuffer(5)
    chunks = [bytes([i] * 5) for i in range(1, 10)]
    for chunk in chunks:
        rb.push_data(chunk[:3])
        rb.push_data(chunk[3:])
        assert rb.available() == 5
        assert rb.read_data(5) == chunk


def test_concurrent_producer_consumer_preserves_order():
    rb = RingBuffer(64)
    payload = bytes(range(256)) * 8
    received = bytearray()

    def produce():
        pos = 0
        while pos < len(payload):
            piece = payload[pos:pos + 7]
            try:
                rb.push_data(piece)
            except RingBufferOverflow:
                continue
            pos += len(piece)

    thread = threading.Thread(target=produce)
    thread.start()
    while len(received) < len(payload):
        n = rb.available()
        if n:
            received += rb.read_data(n)
    thread.join()
    assert bytes(received) == payload


def test_invalid_size():
    with pytest.raises(ValueError):
        RingBuffer(0)