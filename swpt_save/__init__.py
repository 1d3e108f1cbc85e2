"""Reader and writer for SWPT save files."""

from swpt_save.errors import FormatError, SaveGameNotFoundError, UnknownTypeError
from swpt_save.hashing import type_hash

__all__ = ['FormatError', 'SaveGameNotFoundError', 'UnknownTypeError', 'type_hash']
