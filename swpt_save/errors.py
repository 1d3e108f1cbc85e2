"""Exceptions raised by the save codec."""

from __future__ import annotations


class FormatError(ValueError):
    """Structural violation of the save file byte layout."""


class UnknownTypeError(LookupError):
    """A type id read from a save file has no registered value kind."""

    def __init__(self, type_id: int) -> None:
        super().__init__(f'Unknown value type id {type_id:#010x}')
        self.type_id = type_id


class SaveGameNotFoundError(LookupError):
    """No loadable save files were found in a directory."""
