"""
Test save printing helpers.
"""

from pathlib import Path

from scripts.print_save import file_to_json, format_file
from swpt_save.model.save_file import SaveFile


def test_format_file(save_dir: Path) -> None:
    save = SaveFile.load(save_dir / 'Player.sav')

    lines = format_file(save)

    assert lines[0] == '[Player] 5 properties'
    assert '  Gold (Integer): 1500' in lines
    assert '  PlayerName (Text): Aria' in lines
    assert '  Speeds (Number Array): 1.5, -0.25' in lines


def test_file_to_json(save_dir: Path) -> None:
    save = SaveFile.load(save_dir / 'Player.sav')

    data = file_to_json(save)

    assert data['name'] == 'Player'
    assert data['properties'][2] == {'name': 'Hardcore', 'type': 'Boolean', 'value': True}
    assert data['properties'][4]['value'] == [1.5, -0.25]
