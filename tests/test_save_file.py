"""
Tests for save file loading, round-trip serialization and editing.
"""

from pathlib import Path

import pytest

from swpt_save.errors import FormatError, UnknownTypeError
from swpt_save.model.save_file import SaveFile
from swpt_save.model.save_property import SaveProperty
from swpt_save.model.types import ValueKind
from swpt_save.model.values import ArrayValue, Int32Value, StringValue

from conftest import make_frame


@pytest.fixture()
def save_path(tmp_path: Path, sample_file_data: bytes) -> Path:
    path = tmp_path / 'Player.sav'
    path.write_bytes(sample_file_data)
    return path


def test_load_preserves_order_and_duplicates(save_path: Path) -> None:
    save = SaveFile.load(save_path)

    assert save.name == 'Player'
    assert [prop.name for prop in save.properties] == ['Gold', 'PlayerName', 'Hardcore', 'Gold', 'Speeds']
    assert save.properties[0].value.data == 1500
    assert save.properties[1].value.data == 'Aria'
    assert save.properties[2].value.data is True
    assert save.properties[3].value.data == -7

    speeds = save.properties[4].value
    assert isinstance(speeds, ArrayValue)
    assert speeds.item_kind is ValueKind.SINGLE
    assert [item.data for item in speeds] == [1.5, -0.25]


def test_roundtrip_preserves_data(save_path: Path, sample_file_data: bytes, tmp_path: Path) -> None:
    """Test that load -> save produces identical output."""
    save = SaveFile.load(save_path)

    assert save.to_bytes() == sample_file_data

    out_dir = tmp_path / 'out'
    out_dir.mkdir()
    save.save(out_dir)
    assert save.path == out_dir / 'Player.sav'
    assert save.path.read_bytes() == sample_file_data


def test_empty_file_has_no_properties(tmp_path: Path) -> None:
    path = tmp_path / 'empty.sav'
    path.write_bytes(b'')

    assert SaveFile.load(path).properties == []


def test_load_aborts_on_malformed_property(tmp_path: Path, sample_file_data: bytes) -> None:
    path = tmp_path / 'broken.sav'
    path.write_bytes(sample_file_data + b'\x7e\x01x')

    with pytest.raises(FormatError):
        SaveFile.load(path)


def test_load_aborts_on_unknown_type(tmp_path: Path, sample_file_data: bytes) -> None:
    path = tmp_path / 'newer.sav'
    path.write_bytes(sample_file_data + make_frame('Pet', 0x0BADF00D, b'\x00'))

    with pytest.raises(UnknownTypeError):
        SaveFile.load(path)


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        SaveFile.load(tmp_path / 'missing.sav')


def test_save_after_edit(save_path: Path) -> None:
    save = SaveFile.load(save_path)
    save.properties[0].value.data = 99999
    save.add_property(SaveProperty('Title', StringValue('Knight')))
    save.save()

    reloaded = SaveFile.load(save_path)
    assert reloaded.properties[0].value.data == 99999
    assert reloaded.properties[-1].name == 'Title'
    assert reloaded.properties[-1].value.data == 'Knight'


def test_reload_discards_changes_in_place(save_path: Path) -> None:
    save = SaveFile.load(save_path)
    properties = save.properties
    save.properties[0].value.data = 1
    save.remove_property(1)

    save.reload()

    assert save.properties is properties
    assert len(save.properties) == 5
    assert save.properties[0].value.data == 1500


def test_failed_reload_keeps_state(save_path: Path) -> None:
    save = SaveFile.load(save_path)
    save_path.write_bytes(b'garbage')

    with pytest.raises(FormatError):
        save.reload()

    assert len(save.properties) == 5


class TestPropertyEditing:
    """Index based property list operations."""

    @pytest.fixture()
    def save(self, tmp_path: Path) -> SaveFile:
        props = [SaveProperty(name, Int32Value(i)) for i, name in enumerate(['a', 'b', 'c'])]
        return SaveFile(path=tmp_path / 'edit.sav', properties=props)

    def names(self, save: SaveFile) -> list[str]:
        return [prop.name for prop in save.properties]

    def test_insert(self, save: SaveFile):
        save.insert_property(0, SaveProperty('first', Int32Value(0)))
        save.insert_property(4, SaveProperty('last', Int32Value(0)))
        assert self.names(save) == ['first', 'a', 'b', 'c', 'last']

    def test_insert_out_of_range(self, save: SaveFile):
        with pytest.raises(IndexError):
            save.insert_property(4, SaveProperty('x', Int32Value(0)))
        with pytest.raises(IndexError):
            save.insert_property(-1, SaveProperty('x', Int32Value(0)))

    def test_remove(self, save: SaveFile):
        removed = save.remove_property(1)
        assert removed.name == 'b'
        assert self.names(save) == ['a', 'c']

        with pytest.raises(IndexError):
            save.remove_property(2)
        with pytest.raises(IndexError):
            save.remove_property(-1)

    def test_move(self, save: SaveFile):
        save.move_property_up(2)
        assert self.names(save) == ['a', 'c', 'b']
        save.move_property_down(0)
        assert self.names(save) == ['c', 'a', 'b']

    def test_move_bounds(self, save: SaveFile):
        assert not save.can_move_property_up(0)
        assert save.can_move_property_up(2)
        assert not save.can_move_property_up(3)
        assert save.can_move_property_down(1)
        assert not save.can_move_property_down(2)

        save.move_property_up(0)
        save.move_property_down(2)
        assert self.names(save) == ['a', 'b', 'c']

    def test_index_of_property(self, save: SaveFile):
        prop = save.properties[1]
        assert save.index_of_property(prop) == 1
        assert save.index_of_property(SaveProperty('b', Int32Value(1))) == -1

    def test_find_property_with_duplicates(self, save: SaveFile):
        save.add_property(SaveProperty('a', Int32Value(9)))
        first = save.find_property('a')
        assert first == 0
        assert save.find_property('a', first + 1) == 3
        assert save.find_property('a', 4) == -1
        assert save.find_property('missing') == -1

    def test_clone(self, save: SaveFile):
        copy = save.clone('edit_copy')
        assert copy.path == save.path.with_name('edit_copy.sav')
        assert copy.name == 'edit_copy'
        assert self.names(copy) == self.names(save)
        copy.properties[0].value.data = 42
        assert save.properties[0].value.data == 0


def test_failed_save_keeps_path(save_path: Path, tmp_path: Path) -> None:
    save = SaveFile.load(save_path)

    with pytest.raises(OSError):
        save.save(tmp_path / 'missing')

    assert save.path == save_path
