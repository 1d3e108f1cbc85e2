"""Save file model classes."""

from swpt_save.model.save_file import SaveFile
from swpt_save.model.save_game import SaveGame
from swpt_save.model.save_property import SaveProperty
from swpt_save.model.types import ValueKind, resolve_kind
from swpt_save.model.values import ArrayValue, SaveValue, create_value

__all__ = [
    'ArrayValue',
    'SaveFile',
    'SaveGame',
    'SaveProperty',
    'SaveValue',
    'ValueKind',
    'create_value',
    'resolve_kind',
]
