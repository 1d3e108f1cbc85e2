"""Binary writer with seek support for save file serialization."""

from __future__ import annotations

import io
import struct


class Writer:
    """Binary writer with seek support for two-pass size patching."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()

    @property
    def position(self) -> int:
        """Current write position."""
        return self._buffer.tell()

    @position.setter
    def position(self, value: int) -> None:
        """Seek to position."""
        self._buffer.seek(value)

    def to_bytes(self) -> bytes:
        """Get all written data as bytes."""
        return self._buffer.getvalue()

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buffer.write(data)

    def write_uint8(self, value: int) -> None:
        """Write unsigned 8-bit integer."""
        self._buffer.write(struct.pack('<B', value))

    def write_int32(self, value: int) -> None:
        """Write signed 32-bit integer (little-endian)."""
        self._buffer.write(struct.pack('<i', value))

    def write_uint32(self, value: int) -> None:
        """Write unsigned 32-bit integer (little-endian)."""
        self._buffer.write(struct.pack('<I', value))

    def write_float(self, value: float) -> None:
        """Write 32-bit float (little-endian)."""
        self._buffer.write(struct.pack('<f', value))

    def write_bool(self, value: bool) -> None:
        """Write boolean (1 byte)."""
        self.write_uint8(1 if value else 0)

    def write_7bit_int(self, value: int) -> None:
        """Write a .NET 7-bit encoded integer (unsigned, up to 32 bits)."""
        if value < 0 or value > 0xFFFFFFFF:
            raise ValueError(f'7-bit encoded integer out of range: {value}')
        while value >= 0x80:
            self.write_uint8((value & 0x7F) | 0x80)
            value >>= 7
        self.write_uint8(value)

    def write_string(self, value: str) -> None:
        """Write a .NET BinaryWriter string.

        Matches BinaryWriter.Write(string): the UTF-8 byte count as a 7-bit
        encoded integer, followed by the UTF-8 bytes with no terminator.
        """
        data = value.encode('utf-8')
        self.write_7bit_int(len(data))
        self._buffer.write(data)

    def write_prefixed_string(self, value: str) -> None:
        """Write an ASCII string prefixed with a one byte length."""
        data = value.encode('ascii')
        if len(data) > 0xFF:
            raise ValueError(f'String too long for a one byte length prefix: {len(data)} bytes')
        self.write_uint8(len(data))
        self._buffer.write(data)
