"""SaveProperty - a named value wrapped in the property frame.

Frame layout:
    prefix      u8      0x7E
    name        u8 length + ASCII bytes
    size        int32   byte length of everything from here up to and
                        including the postfix byte
    marker      0x53 0xFF for arrays, 0xFF otherwise
    type id     uint32  item kind id for arrays, value kind id otherwise
    payload     per value kind
    postfix     u8      0x7B
"""

from __future__ import annotations

from dataclasses import dataclass

from swpt_save.const import ARRAY_START, MAX_NAME_LENGTH, POSTFIX_BYTE, PREFIX_BYTE, TYPE_PREFIX
from swpt_save.errors import FormatError
from swpt_save.io.reader import Reader
from swpt_save.io.writer import Writer
from swpt_save.model.types import ValueKind, resolve_kind
from swpt_save.model.values import ArrayValue, SaveValue, read_value


@dataclass(eq=False)
class SaveProperty:
    """A single property from a save file."""

    name: str
    value: SaveValue

    @classmethod
    def read(cls, reader: Reader) -> SaveProperty:
        """Read one framed property from reader.

        Raises:
            FormatError: On any marker or size mismatch, or truncated data
            UnknownTypeError: If the type id is not a known value kind
        """
        prefix = reader.read_uint8()
        if prefix != PREFIX_BYTE:
            raise FormatError(f'Unexpected property prefix {prefix:#04x} at position {reader.position - 1}')

        name = reader.read_prefixed_string()
        size = reader.read_int32()
        start_pos = reader.position

        marker = reader.read_uint8()
        if marker == ARRAY_START:
            is_array = True
            type_prefix = reader.read_uint8()
            if type_prefix != TYPE_PREFIX:
                raise FormatError(f'Unexpected type prefix {type_prefix:#04x} in array property {name!r}')
        elif marker == TYPE_PREFIX:
            is_array = False
        else:
            raise FormatError(f'Unexpected type marker {marker:#04x} in property {name!r}')

        kind = resolve_kind(reader.read_uint32())
        value = read_value(reader, kind, is_array)

        postfix = reader.read_uint8()
        if postfix != POSTFIX_BYTE:
            raise FormatError(f'Unexpected property postfix {postfix:#04x} in property {name!r}')

        actual_size = reader.position - start_pos
        if actual_size != size:
            raise FormatError(f'Property {name!r} length mismatch: header says {size}, read {actual_size}')

        return cls(name=name, value=value)

    def write(self, writer: Writer) -> None:
        """Write this property, patching the frame size once it is known."""
        encoded_name = self.name.encode('ascii')
        if len(encoded_name) > MAX_NAME_LENGTH:
            raise ValueError(f'Property name too long: {len(encoded_name)} bytes (max {MAX_NAME_LENGTH})')

        writer.write_uint8(PREFIX_BYTE)
        writer.write_prefixed_string(self.name)

        # Write size placeholder
        size_pos = writer.position
        writer.write_int32(0)  # Will patch later

        start_pos = writer.position
        if isinstance(self.value, ArrayValue):
            writer.write_uint8(ARRAY_START)
            writer.write_uint8(TYPE_PREFIX)
            writer.write_uint32(self.value.item_kind.id)
        else:
            writer.write_uint8(TYPE_PREFIX)
            writer.write_uint32(self.value.kind.id)

        self.value.write(writer)
        writer.write_uint8(POSTFIX_BYTE)
        end_pos = writer.position

        # Patch size
        writer.position = size_pos
        writer.write_int32(end_pos - start_pos)
        writer.position = end_pos

    @classmethod
    def from_bytes(cls, data: bytes) -> SaveProperty:
        """Parse a single property, e.g. from the clipboard.

        Raises:
            FormatError: If data holds anything besides exactly one property
        """
        reader = Reader(data)
        prop = cls.read(reader)
        if not reader.at_end:
            raise FormatError(f'{reader.remaining} unexpected bytes after property {prop.name!r}')
        return prop

    def to_bytes(self) -> bytes:
        """Serialize this property on its own, e.g. for the clipboard."""
        writer = Writer()
        self.write(writer)
        return writer.to_bytes()

    def clone(self) -> SaveProperty:
        """Deep copy sharing no mutable state with this property."""
        return SaveProperty(name=self.name, value=self.value.clone())

    @property
    def kind(self) -> ValueKind:
        return self.value.kind

    def __str__(self) -> str:
        return f'{self.name}: {self.value}'
