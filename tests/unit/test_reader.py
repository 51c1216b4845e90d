"""Tests for the big-endian byte reader."""

import struct

import pytest

from cellwidths_gen.core.errors import SfntFormatError
from cellwidths_gen.core.reader import ByteReader


def test_reads_big_endian_fields():
    """Test fixed-width reads advance the offset."""
    data = struct.pack(">HhI4s", 0x1234, -2, 0xDEADBEEF, b"cmap")
    reader = ByteReader(data)

    assert reader.read_uint16() == 0x1234
    assert reader.read_int16() == -2
    assert reader.read_uint32() == 0xDEADBEEF
    assert reader.read_tag() == "cmap"
    assert reader.remaining == 0


def test_read_arrays():
    """Test array reads."""
    reader = ByteReader(struct.pack(">3H2h", 1, 2, 3, -1, -2))
    assert reader.read_uint16_array(3) == (1, 2, 3)
    assert reader.read_int16_array(2) == (-1, -2)
    assert reader.read_uint16_array(0) == ()


def test_read_past_end_raises():
    """Test truncated reads raise and leave the offset unchanged."""
    reader = ByteReader(b"\x00\x01\x02")
    reader.read_uint16()
    with pytest.raises(SfntFormatError):
        reader.read_uint16()
    assert reader.offset == 2
    with pytest.raises(SfntFormatError):
        reader.read_bytes(5)


def test_seek_outside_buffer_raises():
    """Test seeking is limited to the buffer."""
    reader = ByteReader(b"\x00" * 4)
    reader.seek(4)
    assert reader.remaining == 0
    with pytest.raises(SfntFormatError):
        reader.seek(5)
    with pytest.raises(SfntFormatError):
        ByteReader(b"", offset=1)


def test_fork_is_independent():
    """Test forked readers do not share a position."""
    reader = ByteReader(struct.pack(">HHH", 10, 20, 30))
    fork = reader.fork(4)
    assert fork.read_uint16() == 30
    assert reader.offset == 0
    assert reader.read_uint16() == 10


def test_uint16_at():
    """Test absolute reads do not move the reader."""
    reader = ByteReader(struct.pack(">HH", 10, 20))
    assert reader.uint16_at(2) == 20
    assert reader.offset == 0
    with pytest.raises(SfntFormatError):
        reader.uint16_at(3)
