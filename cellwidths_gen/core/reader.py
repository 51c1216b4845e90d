"""
Positioned big-endian reads over an in-memory font buffer.

All SFNT fields are big-endian. A ``ByteReader`` owns only its position;
the underlying buffer is never modified, so several readers may address
the same font data independently (see ``ByteReader.fork``).
"""

import struct

from cellwidths_gen.core.errors import SfntFormatError

_u16 = struct.Struct(">H")
_i16 = struct.Struct(">h")
_u32 = struct.Struct(">I")


class ByteReader:
    """Sequential reader with explicit absolute seek."""

    def __init__(self, data: bytes, offset: int = 0):
        self.data = data
        self.offset = 0
        self.seek(offset)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def remaining(self) -> int:
        """Number of bytes after the current position."""
        return len(self.data) - self.offset

    def seek(self, offset: int) -> None:
        """Move to an absolute position within the buffer."""
        if not 0 <= offset <= len(self.data):
            raise SfntFormatError(
                f"Seek to offset {offset} outside buffer of {len(self.data)} bytes"
            )
        self.offset = offset

    def fork(self, offset: int) -> "ByteReader":
        """Return an independent reader over the same buffer at ``offset``."""
        return ByteReader(self.data, offset)

    def skip(self, size: int) -> None:
        self._advance(size)

    def _advance(self, size: int) -> int:
        """Reserve ``size`` bytes and return their start position."""
        start = self.offset
        if size < 0 or start + size > len(self.data):
            raise SfntFormatError(
                f"Read of {size} bytes at offset {start} "
                f"exceeds buffer of {len(self.data)} bytes"
            )
        self.offset = start + size
        return start

    def _unpack(self, fmt: struct.Struct) -> int:
        start = self._advance(fmt.size)
        return fmt.unpack_from(self.data, start)[0]

    def read_uint16(self) -> int:
        return self._unpack(_u16)

    def read_int16(self) -> int:
        return self._unpack(_i16)

    def read_uint32(self) -> int:
        return self._unpack(_u32)

    def read_bytes(self, size: int) -> bytes:
        start = self._advance(size)
        return bytes(self.data[start : start + size])

    def read_tag(self) -> str:
        """Read a 4-byte table tag as text."""
        return self.read_bytes(4).decode("latin-1")

    def read_uint16_array(self, count: int) -> tuple[int, ...]:
        start = self._advance(2 * count)
        return struct.unpack_from(f">{count}H", self.data, start)

    def read_int16_array(self, count: int) -> tuple[int, ...]:
        start = self._advance(2 * count)
        return struct.unpack_from(f">{count}h", self.data, start)

    def read_uint32_array(self, count: int) -> tuple[int, ...]:
        start = self._advance(4 * count)
        return struct.unpack_from(f">{count}I", self.data, start)

    def uint16_at(self, offset: int) -> int:
        """Read an unsigned 16-bit value at an absolute offset without moving."""
        if not 0 <= offset <= len(self.data) - 2:
            raise SfntFormatError(
                f"Read of 2 bytes at offset {offset} "
                f"exceeds buffer of {len(self.data)} bytes"
            )
        return _u16.unpack_from(self.data, offset)[0]
