"""SaveFile - one file of a save game, an ordered list of properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from swpt_save.io.reader import Reader
from swpt_save.io.writer import Writer
from swpt_save.log import log
from swpt_save.model.save_property import SaveProperty


@dataclass(eq=False)
class SaveFile:
    """Properties of a single save file, in file order.

    There is no header, checksum or count: properties follow each other until
    the end of the file. Names are not unique.
    """

    path: Path
    properties: list[SaveProperty] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    @property
    def name(self) -> str:
        """File name without extension."""
        return self.path.stem

    @classmethod
    def load(cls, path: Path) -> SaveFile:
        """Load a save file.

        Args:
            path: Path to the save file

        Returns:
            Parsed SaveFile

        Raises:
            FormatError: If any property is malformed
            UnknownTypeError: If any property has an unknown type id
            OSError: If the file cannot be read
        """
        path = Path(path)
        return cls.from_bytes(path.read_bytes(), path)

    @classmethod
    def from_bytes(cls, data: bytes, path: Path) -> SaveFile:
        """Parse a save file from bytes, remembering path for later saves."""
        return cls(path=Path(path), properties=read_properties(data))

    def to_bytes(self) -> bytes:
        """Serialize every property in order."""
        writer = Writer()
        for prop in self.properties:
            prop.write(writer)
        return writer.to_bytes()

    def save(self, directory: Path | None = None) -> None:
        """Write the file to its path, replacing any existing content.

        Args:
            directory: If given, the file moves into this directory (keeping
                its filename) before saving
        """
        path = self.path if directory is None else Path(directory) / self.path.name

        data = self.to_bytes()
        path.write_bytes(data)
        self.path = path
        log.debug(f'Saved {len(self.properties)} properties ({len(data)} bytes) to {self.path}')

    def reload(self) -> None:
        """Discard in-memory changes and re-read the file from its path.

        The property list object is updated in place. If reading fails, the
        current properties are left untouched.
        """
        properties = read_properties(self.path.read_bytes())
        self.properties[:] = properties
        log.debug(f'Reloaded {len(properties)} properties from {self.path}')

    def clone(self, new_name: str) -> SaveFile:
        """Deep copy of this file, stored next to it under a new name."""
        path = self.path.with_name(new_name + self.path.suffix)
        return SaveFile(path=path, properties=[prop.clone() for prop in self.properties])

    def add_property(self, prop: SaveProperty) -> None:
        self.properties.append(prop)

    def insert_property(self, index: int, prop: SaveProperty) -> None:
        """Insert a property before index (index == count appends)."""
        if not 0 <= index <= len(self.properties):
            raise IndexError(f'Property index {index} out of range [0, {len(self.properties)}]')
        self.properties.insert(index, prop)

    def remove_property(self, index: int) -> SaveProperty:
        """Remove and return the property at index."""
        if not 0 <= index < len(self.properties):
            raise IndexError(f'Property index {index} out of range [0, {len(self.properties)})')
        return self.properties.pop(index)

    def can_move_property_up(self, index: int) -> bool:
        return 1 <= index < len(self.properties)

    def can_move_property_down(self, index: int) -> bool:
        return 0 <= index < len(self.properties) - 1

    def move_property_up(self, index: int) -> None:
        if not self.can_move_property_up(index):
            return
        self.properties.insert(index - 1, self.properties.pop(index))

    def move_property_down(self, index: int) -> None:
        if not self.can_move_property_down(index):
            return
        self.properties.insert(index + 1, self.properties.pop(index))

    def index_of_property(self, prop: SaveProperty) -> int:
        """Position of this exact property object, or -1."""
        for i, candidate in enumerate(self.properties):
            if candidate is prop:
                return i
        return -1

    def find_property(self, name: str, start: int = 0) -> int:
        """Index of the first property named name at or after start, or -1."""
        for i in range(max(start, 0), len(self.properties)):
            if self.properties[i].name == name:
                return i
        return -1

    def __str__(self) -> str:
        return self.name


def read_properties(data: bytes) -> list[SaveProperty]:
    """Decode properties until the data is exhausted."""
    reader = Reader(data)
    properties = []
    while not reader.at_end:
        properties.append(SaveProperty.read(reader))

    log.debug(f'Read {len(properties)} properties from {len(data)} bytes')
    return properties
