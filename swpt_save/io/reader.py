"""Binary reader with position tracking for save file parsing."""

from __future__ import annotations

import struct

from swpt_save.errors import FormatError


class Reader:
    """Binary reader with position tracking and little-endian support."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._position = 0

    @property
    def position(self) -> int:
        """Current read position."""
        return self._position

    @property
    def remaining(self) -> int:
        """Bytes remaining to read."""
        return len(self._data) - self._position

    @property
    def at_end(self) -> bool:
        """True once every byte has been consumed."""
        return self._position >= len(self._data)

    def read_bytes(self, count: int) -> bytes:
        """Read raw bytes."""
        if count < 0 or self._position + count > len(self._data):
            raise FormatError(f'Cannot read {count} bytes at position {self._position}, only {self.remaining} remaining')
        result = self._data[self._position : self._position + count]
        self._position += count
        return result

    def read_uint8(self) -> int:
        """Read unsigned 8-bit integer."""
        return struct.unpack('<B', self.read_bytes(1))[0]

    def read_int32(self) -> int:
        """Read signed 32-bit integer (little-endian)."""
        return struct.unpack('<i', self.read_bytes(4))[0]

    def read_uint32(self) -> int:
        """Read unsigned 32-bit integer (little-endian)."""
        return struct.unpack('<I', self.read_bytes(4))[0]

    def read_float(self) -> float:
        """Read 32-bit float (little-endian)."""
        return struct.unpack('<f', self.read_bytes(4))[0]

    def read_bool(self) -> bool:
        """Read boolean (1 byte)."""
        return self.read_uint8() != 0

    def read_7bit_int(self) -> int:
        """Read a .NET 7-bit encoded integer.

        Each byte carries seven bits of the value, least significant group
        first; the high bit marks that another byte follows. At most five
        bytes are used for a 32-bit value.
        """
        result = 0
        for shift in range(0, 35, 7):
            byte = self.read_uint8()
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return result
        raise FormatError(f'7-bit encoded integer too long at position {self._position}')

    def read_string(self) -> str:
        """Read a .NET BinaryWriter string (7-bit length, UTF-8 bytes)."""
        length = self.read_7bit_int()
        if length > 0x7FFFFFFF:
            raise FormatError(f'Invalid string length {length}')
        data = self.read_bytes(length)
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise FormatError(f'Invalid UTF-8 string ending at position {self._position}') from e

    def read_prefixed_string(self) -> str:
        """Read an ASCII string prefixed with a one byte length."""
        length = self.read_uint8()
        data = self.read_bytes(length)
        try:
            return data.decode('ascii')
        except UnicodeDecodeError as e:
            raise FormatError(f'Non-ASCII name ending at position {self._position}') from e
