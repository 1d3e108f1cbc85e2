"""Typed values stored in save file properties.

Each ValueKind has one SaveValue subclass that owns the payload and knows how
to read and write it. Payloads carry no type tag of their own; the kind is
resolved from the enclosing property frame (or the array's item kind).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, ClassVar

from swpt_save.const import ARRAY_DISPLAY_LIMIT, ARRAY_MARKER
from swpt_save.errors import FormatError
from swpt_save.model.memory import LinearColor, Vector2, Vector3, Vector4, float32_equal, format_float, to_float32
from swpt_save.model.types import ValueKind

if TYPE_CHECKING:
    from swpt_save.io.reader import Reader
    from swpt_save.io.writer import Writer


INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF


class SaveValue:
    """Base class for the value of a SaveProperty.

    The kind is fixed per subclass (and per instance for arrays); only the
    payload in ``data`` can change. Setting ``data`` validates the payload.
    """

    KIND: ClassVar[ValueKind]

    def __init__(self, data: Any = None) -> None:
        self._data = self.default_data() if data is None else self.validate(data)

    @property
    def kind(self) -> ValueKind:
        return self.KIND

    @property
    def data(self) -> Any:
        return self._data

    @data.setter
    def data(self, value: Any) -> None:
        self._data = self.validate(value)

    @property
    def display_type(self) -> str:
        return self.kind.display_name

    def default_data(self) -> Any:
        raise NotImplementedError

    def validate(self, data: Any) -> Any:
        """Check a payload for this kind and return the value to store."""
        raise NotImplementedError

    def read_data(self, reader: Reader) -> None:
        """Replace the payload with one decoded from reader."""
        raise NotImplementedError

    def write(self, writer: Writer) -> None:
        """Write the payload (no type tag) to writer."""
        raise NotImplementedError

    def clone_data(self) -> Any:
        """Copy of the payload that shares no mutable state with this value."""
        return self._data

    def compare_data(self, data: Any) -> bool:
        """True if data equals this value's payload."""
        return self._data == data

    def clone(self) -> SaveValue:
        value = create_value(self.kind)
        value.data = self.clone_data()
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SaveValue) or type(other) is not type(self):
            return NotImplemented
        return self.compare_data(other.data)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self._data)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._data!r})'


class StringValue(SaveValue):
    """Text, stored as a .NET BinaryWriter string."""

    KIND = ValueKind.STRING

    def default_data(self) -> str:
        return ''

    def validate(self, data: Any) -> str:
        if not isinstance(data, str):
            raise TypeError(f'{self.kind.display_name} value must be str, not {type(data).__name__}')
        return data

    def read_data(self, reader: Reader) -> None:
        self._data = reader.read_string()

    def write(self, writer: Writer) -> None:
        writer.write_string(self._data)


class BoolValue(SaveValue):
    """Boolean, one byte on the wire."""

    KIND = ValueKind.BOOL

    def default_data(self) -> bool:
        return False

    def validate(self, data: Any) -> bool:
        if not isinstance(data, bool):
            raise TypeError(f'{self.kind.display_name} value must be bool, not {type(data).__name__}')
        return data

    def read_data(self, reader: Reader) -> None:
        self._data = reader.read_bool()

    def write(self, writer: Writer) -> None:
        writer.write_bool(self._data)


class Int32Value(SaveValue):
    KIND = ValueKind.INT32

    def default_data(self) -> int:
        return 0

    def validate(self, data: Any) -> int:
        if isinstance(data, bool) or not isinstance(data, int):
            raise TypeError(f'{self.kind.display_name} value must be int, not {type(data).__name__}')
        if not INT32_MIN <= data <= INT32_MAX:
            raise ValueError(f'{data} does not fit in a signed 32-bit integer')
        return data

    def read_data(self, reader: Reader) -> None:
        self._data = reader.read_int32()

    def write(self, writer: Writer) -> None:
        writer.write_int32(self._data)


class SingleValue(SaveValue):
    """Single precision float.

    Assigned values are rounded to single precision so the in-memory payload
    always equals what a write/read cycle produces.
    """

    KIND = ValueKind.SINGLE

    def default_data(self) -> float:
        return 0.0

    def validate(self, data: Any) -> float:
        return to_float32(data, f'{self.kind.display_name} value')

    def read_data(self, reader: Reader) -> None:
        self._data = reader.read_float()

    def write(self, writer: Writer) -> None:
        writer.write_float(self._data)

    def compare_data(self, data: Any) -> bool:
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            return False
        return float32_equal(self._data, data)

    def __str__(self) -> str:
        return format_float(self._data)


class _StructValue(SaveValue):
    """Value holding one of the fixed-size structures from model.memory.

    The structures check and round their own fields on assignment.
    """

    STRUCT: ClassVar[type]

    def default_data(self) -> Any:
        return self.STRUCT()

    def validate(self, data: Any) -> Any:
        if not isinstance(data, self.STRUCT):
            raise TypeError(f'{self.kind.display_name} value must be {self.STRUCT.__name__}, not {type(data).__name__}')
        return data

    def read_data(self, reader: Reader) -> None:
        self._data = self.STRUCT.read(reader)

    def write(self, writer: Writer) -> None:
        self._data.write(writer)

    def clone_data(self) -> Any:
        return self._data.clone()

    def compare_data(self, data: Any) -> bool:
        return self._data.equals(data)


class Vector2Value(_StructValue):
    KIND = ValueKind.VECTOR2
    STRUCT = Vector2


class Vector3Value(_StructValue):
    KIND = ValueKind.VECTOR3
    STRUCT = Vector3


class Vector4Value(_StructValue):
    KIND = ValueKind.VECTOR4
    STRUCT = Vector4


class LinearColorValue(_StructValue):
    KIND = ValueKind.LINEAR_COLOR
    STRUCT = LinearColor


class ArrayValue(SaveValue):
    """Ordered list of values that all share one item kind.

    Format:
    - marker byte (0)
    - element count (int32)
    - each element's payload, with no per-element type tag

    Arrays of arrays cannot be represented: the frame stores a single item
    kind id, and Array's id is reserved for the array marker.
    """

    KIND = ValueKind.ARRAY

    def __init__(self, item_kind: ValueKind, items: Iterable[SaveValue] | None = None) -> None:
        if not isinstance(item_kind, ValueKind):
            raise TypeError(f'Array item kind must be a ValueKind, not {type(item_kind).__name__}')
        if item_kind is ValueKind.ARRAY:
            raise ValueError('Arrays of arrays are not supported')
        self._item_kind = item_kind
        super().__init__(items)

    @property
    def item_kind(self) -> ValueKind:
        return self._item_kind

    @property
    def display_type(self) -> str:
        return f'{self._item_kind.display_name} {self.kind.display_name}'

    @property
    def display_string(self) -> str:
        """Items joined by commas for short arrays, otherwise an item count."""
        if 0 < len(self._data) <= ARRAY_DISPLAY_LIMIT:
            return ', '.join(str(item) for item in self._data)
        return f'{len(self._data)} Items'

    def default_data(self) -> list[SaveValue]:
        return []

    def validate(self, data: Any) -> list[SaveValue]:
        if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
            raise TypeError(f'Array value must be a list of SaveValue, not {type(data).__name__}')
        items = list(data)
        for item in items:
            self._check_item(item)
        return items

    def _check_item(self, item: Any) -> None:
        if not isinstance(item, SaveValue):
            raise TypeError(f'Array items must be SaveValue, not {type(item).__name__}')
        if item.kind is not self._item_kind:
            raise ValueError(f'Cannot store {item.kind.display_name} in {self.display_type}')

    def _check_index(self, index: int, upper: int) -> None:
        if not 0 <= index < upper:
            raise IndexError(f'Item index {index} out of range [0, {upper})')

    def read_data(self, reader: Reader) -> None:
        self._data.clear()

        marker = reader.read_uint8()
        if marker != ARRAY_MARKER:
            raise FormatError(f'Unexpected array marker {marker:#04x}')

        count = reader.read_int32()
        if count < 0:
            raise FormatError(f'Negative array length {count}')

        for _ in range(count):
            self._data.append(read_value(reader, self._item_kind, False))

    def write(self, writer: Writer) -> None:
        writer.write_uint8(ARRAY_MARKER)
        writer.write_int32(len(self._data))
        for item in self._data:
            item.write(writer)

    def clone_data(self) -> list[SaveValue]:
        return [item.clone() for item in self._data]

    def compare_data(self, data: Any) -> bool:
        if not isinstance(data, list) or len(data) != len(self._data):
            return False
        for mine, theirs in zip(self._data, data):
            if not isinstance(theirs, SaveValue) or theirs.kind is not mine.kind:
                return False
            if not mine.compare_data(theirs.data):
                return False
        return True

    def clone(self) -> ArrayValue:
        return ArrayValue(self._item_kind, self.clone_data())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayValue):
            return NotImplemented
        return self._item_kind is other._item_kind and self.compare_data(other.data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[SaveValue]:
        return iter(self._data)

    def __getitem__(self, index: int) -> SaveValue:
        return self._data[index]

    def __setitem__(self, index: int, item: SaveValue) -> None:
        self._check_index(index, len(self._data))
        self._check_item(item)
        self._data[index] = item

    def __str__(self) -> str:
        return f'{len(self._data)} items'

    def __repr__(self) -> str:
        return f'ArrayValue({self._item_kind.name}, {self._data!r})'

    def index_of_item(self, item: SaveValue) -> int:
        """Position of this exact item object, or -1."""
        for i, candidate in enumerate(self._data):
            if candidate is item:
                return i
        return -1

    def create_item(self) -> SaveValue:
        """New default value of the item kind (not added to the array)."""
        return create_value(self._item_kind)

    def add_item(self, item: SaveValue) -> None:
        self._check_item(item)
        self._data.append(item)

    def insert_item(self, index: int, item: SaveValue) -> None:
        self._check_index(index, len(self._data) + 1)
        self._check_item(item)
        self._data.insert(index, item)

    def replace_item(self, index: int, item: SaveValue) -> None:
        self[index] = item

    def remove_item(self, index: int) -> None:
        self._check_index(index, len(self._data))
        del self._data[index]

    def remove_items(self, items: Iterable[SaveValue]) -> None:
        """Remove each of the given item objects that is present."""
        for item in list(items):
            index = self.index_of_item(item)
            if index >= 0:
                del self._data[index]

    def clear_items(self) -> None:
        self._data.clear()

    def move_item_up(self, index: int) -> None:
        if index < 1 or index >= len(self._data):
            return
        self._data.insert(index - 1, self._data.pop(index))

    def move_item_down(self, index: int) -> None:
        if index < 0 or index >= len(self._data) - 1:
            return
        self._data.insert(index + 1, self._data.pop(index))


def create_value(kind: ValueKind, item_kind: ValueKind | None = None) -> SaveValue:
    """Create a default value of the given kind.

    Args:
        kind: Kind of value to create
        item_kind: Item kind, required when kind is Array

    Returns:
        New SaveValue holding the kind's default payload
    """
    if kind is ValueKind.ARRAY:
        if item_kind is None:
            raise ValueError('Creating an array value requires an item kind')
        return ArrayValue(item_kind)
    elif kind is ValueKind.STRING:
        return StringValue()
    elif kind is ValueKind.BOOL:
        return BoolValue()
    elif kind is ValueKind.INT32:
        return Int32Value()
    elif kind is ValueKind.SINGLE:
        return SingleValue()
    elif kind is ValueKind.VECTOR2:
        return Vector2Value()
    elif kind is ValueKind.VECTOR3:
        return Vector3Value()
    elif kind is ValueKind.VECTOR4:
        return Vector4Value()
    elif kind is ValueKind.LINEAR_COLOR:
        return LinearColorValue()
    else:
        raise ValueError(f'Unsupported value kind: {kind!r}')


def read_value(reader: Reader, kind: ValueKind, is_array: bool) -> SaveValue:
    """Read a value payload.

    Args:
        reader: Reader positioned at the payload
        kind: Kind from the frame; the item kind when is_array is set
        is_array: True if the frame carried the array marker
    """
    if kind is ValueKind.ARRAY:
        if is_array:
            raise FormatError('Arrays of arrays are not supported')
        raise FormatError('Array type id found outside an array frame')

    value = ArrayValue(kind) if is_array else create_value(kind)
    value.read_data(reader)
    return value
