#!/usr/bin/env python3
"""
Print the properties of an SWPT save file or save directory.

Usage:
    uv run python scripts/print_save.py <path> [--file NAME] [--json]

Examples:
    # Print every file of a save slot
    uv run python scripts/print_save.py ~/saves/Save1

    # Print one file of the slot as JSON
    uv run python scripts/print_save.py ~/saves/Save1 --file Player --json
"""

import argparse
import json
import sys
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any

from swpt_save.errors import SaveGameNotFoundError
from swpt_save.log import log
from swpt_save.model.save_file import SaveFile
from swpt_save.model.save_game import SaveGame
from swpt_save.model.values import ArrayValue, SaveValue


def value_to_json(value: SaveValue) -> Any:
    """Convert a value payload to plain JSON types."""
    if isinstance(value, ArrayValue):
        return [value_to_json(item) for item in value]
    if is_dataclass(value.data):
        return asdict(value.data)
    return value.data


def file_to_json(save_file: SaveFile) -> dict:
    return {
        'name': save_file.name,
        'properties': [
            {'name': prop.name, 'type': prop.value.display_type, 'value': value_to_json(prop.value)}
            for prop in save_file.properties
        ],
    }


def format_file(save_file: SaveFile) -> list[str]:
    """Human readable lines for one file."""
    lines = [f'[{save_file.name}] {len(save_file.properties)} properties']
    for prop in save_file.properties:
        value = prop.value
        text = value.display_string if isinstance(value, ArrayValue) else str(value)
        lines.append(f'  {prop.name} ({value.display_type}): {text}')
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(description='Print the properties of a save file or directory')
    parser.add_argument('path', type=Path, help='Save file or save directory')
    parser.add_argument('--file', '-f', help='Only print the file with this name (directory input)')
    parser.add_argument('--json', action='store_true', help='Output as JSON')

    args = parser.parse_args()

    if args.path.is_dir():
        try:
            game = SaveGame.load(args.path)
        except SaveGameNotFoundError as e:
            log.error(str(e))
            sys.exit(1)
        files = game.files
        if args.file:
            save_file = game.get_file(args.file)
            if save_file is None:
                log.error(f'No file named {args.file!r} in {game.directory}')
                sys.exit(1)
            files = [save_file]
    else:
        files = [SaveFile.load(args.path)]

    if args.json:
        print(json.dumps([file_to_json(f) for f in files], indent=2))
    else:
        for save_file in files:
            print('\n'.join(format_file(save_file)))


if __name__ == '__main__':
    main()
