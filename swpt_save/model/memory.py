"""Fixed-size vector and color structures stored in save values.

All fields are IEEE-754 single precision floats, little-endian, in
declaration order.
"""

from __future__ import annotations

import math
import struct
from dataclasses import astuple, dataclass, fields, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from swpt_save.io.reader import Reader
    from swpt_save.io.writer import Writer


def format_float(value: float) -> str:
    """Format a single precision value without float64 noise digits."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return f'{value:.7g}'


def to_float32(value: Any, name: str = 'value') -> float:
    """Round a number to single precision.

    Raises:
        TypeError: If value is not an int or float
        ValueError: If value is outside single precision range
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f'{name} must be float, not {type(value).__name__}')
    try:
        return struct.unpack('<f', struct.pack('<f', value))[0]
    except OverflowError as e:
        raise ValueError(f'{name} {value} is out of single precision range') from e


def float32_equal(a: float, b: float) -> bool:
    """Equality that treats NaN as equal to NaN."""
    return a == b or (math.isnan(a) and math.isnan(b))


class FloatStruct:
    """Base for structures made only of single precision fields.

    Every field assignment, including those made by __init__, is checked and
    rounded to single precision, so the in-memory value is what a write/read
    cycle produces.
    """

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, to_float32(value, f'{type(self).__name__}.{name}'))

    def equals(self, other: Any) -> bool:
        """Field-wise comparison with NaN equal to NaN."""
        if type(other) is not type(self):
            return False
        return all(float32_equal(getattr(self, f.name), getattr(other, f.name)) for f in fields(self))

    def clone(self):
        return replace(self)

    def __str__(self) -> str:
        return '(' + ', '.join(format_float(v) for v in astuple(self)) + ')'


@dataclass
class Vector2(FloatStruct):
    """Unity 2D vector (8 bytes - 2 floats)."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def read(cls, reader: Reader) -> Vector2:
        """Read Vector2 from reader."""
        return cls(
            x=reader.read_float(),
            y=reader.read_float(),
        )

    def write(self, writer: Writer) -> None:
        """Write Vector2 to writer."""
        writer.write_float(self.x)
        writer.write_float(self.y)


@dataclass
class Vector3(FloatStruct):
    """Unity 3D vector (12 bytes - 3 floats)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def read(cls, reader: Reader) -> Vector3:
        """Read Vector3 from reader."""
        return cls(
            x=reader.read_float(),
            y=reader.read_float(),
            z=reader.read_float(),
        )

    def write(self, writer: Writer) -> None:
        """Write Vector3 to writer."""
        writer.write_float(self.x)
        writer.write_float(self.y)
        writer.write_float(self.z)


@dataclass
class Vector4(FloatStruct):
    """Unity 4D vector (16 bytes - 4 floats)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def read(cls, reader: Reader) -> Vector4:
        """Read Vector4 from reader."""
        return cls(
            x=reader.read_float(),
            y=reader.read_float(),
            z=reader.read_float(),
            w=reader.read_float(),
        )

    def write(self, writer: Writer) -> None:
        """Write Vector4 to writer."""
        writer.write_float(self.x)
        writer.write_float(self.y)
        writer.write_float(self.z)
        writer.write_float(self.w)


@dataclass
class LinearColor(FloatStruct):
    """Color in linear space (16 bytes - 4 floats, RGBA).

    Defaults to opaque magenta so a freshly created color is easy to spot.
    """

    r: float = 1.0
    g: float = 0.0
    b: float = 1.0
    a: float = 1.0

    @classmethod
    def read(cls, reader: Reader) -> LinearColor:
        """Read LinearColor from reader."""
        return cls(
            r=reader.read_float(),
            g=reader.read_float(),
            b=reader.read_float(),
            a=reader.read_float(),
        )

    def write(self, writer: Writer) -> None:
        """Write LinearColor to writer."""
        writer.write_float(self.r)
        writer.write_float(self.g)
        writer.write_float(self.b)
        writer.write_float(self.a)
