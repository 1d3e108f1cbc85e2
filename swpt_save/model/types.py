"""Value kinds known to the save format.

The ids are persisted in every save file: each one is either a fixed
constant (Array) or the runtime hash of the kind's .NET type name. They must
never change once assigned.
"""

from __future__ import annotations

from enum import Enum, unique

from swpt_save.errors import UnknownTypeError
from swpt_save.hashing import MASK_32, type_hash


@unique
class ValueKind(Enum):
    """Kind of data held by a SaveValue, keyed by its persisted type id."""

    ARRAY = 0x53
    STRING = type_hash('System.String')
    BOOL = type_hash('System.Boolean')
    INT32 = type_hash('System.Int32')
    SINGLE = type_hash('System.Single')
    VECTOR2 = type_hash('UnityEngine.Vector2')
    VECTOR3 = type_hash('UnityEngine.Vector3')
    VECTOR4 = type_hash('UnityEngine.Vector4')
    LINEAR_COLOR = type_hash('UnityEngine.Color')

    @property
    def id(self) -> int:
        """Persisted type id (unsigned 32-bit)."""
        return self.value

    @property
    def type_name(self) -> str | None:
        """.NET type name the id is hashed from, None for Array."""
        return TYPE_NAMES.get(self)

    @property
    def display_name(self) -> str:
        """Human readable name shown by editors."""
        return DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


TYPE_NAMES: dict[ValueKind, str] = {
    ValueKind.STRING: 'System.String',
    ValueKind.BOOL: 'System.Boolean',
    ValueKind.INT32: 'System.Int32',
    ValueKind.SINGLE: 'System.Single',
    ValueKind.VECTOR2: 'UnityEngine.Vector2',
    ValueKind.VECTOR3: 'UnityEngine.Vector3',
    ValueKind.VECTOR4: 'UnityEngine.Vector4',
    ValueKind.LINEAR_COLOR: 'UnityEngine.Color',
}

DISPLAY_NAMES: dict[ValueKind, str] = {
    ValueKind.ARRAY: 'Array',
    ValueKind.STRING: 'Text',
    ValueKind.BOOL: 'Boolean',
    ValueKind.INT32: 'Integer',
    ValueKind.SINGLE: 'Number',
    ValueKind.VECTOR2: '2D Vector',
    ValueKind.VECTOR3: '3D Vector',
    ValueKind.VECTOR4: '4D Vector',
    ValueKind.LINEAR_COLOR: 'Color',
}


def resolve_kind(type_id: int) -> ValueKind:
    """Resolve a type id read from a save file.

    Signed ids are accepted and reinterpreted as unsigned.

    Raises:
        UnknownTypeError: If no kind has this id
    """
    type_id &= MASK_32
    try:
        return ValueKind(type_id)
    except ValueError:
        raise UnknownTypeError(type_id) from None


def item_kinds() -> list[ValueKind]:
    """Kinds that can be stored as array items (every kind except Array)."""
    return [kind for kind in ValueKind if kind is not ValueKind.ARRAY]
