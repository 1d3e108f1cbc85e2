"""SaveGame - the files of one save slot, loaded from a directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from swpt_save.errors import SaveGameNotFoundError
from swpt_save.log import log
from swpt_save.model.save_file import SaveFile


@dataclass(eq=False)
class SaveGame:
    """A save game: every loadable save file in one directory.

    There is no manifest; files are identified by filename only.
    """

    directory: Path
    files: list[SaveFile] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.directory = Path(self.directory)

    @property
    def name(self) -> str:
        """Directory name without extension."""
        return self.directory.stem

    @classmethod
    def load(cls, directory: Path) -> SaveGame:
        """Load every save file in directory (not recursive).

        Files that fail to parse are skipped, since a save directory may hold
        unrelated files.

        Raises:
            SaveGameNotFoundError: If the directory cannot be listed or no
                file in it could be loaded.
        """
        game = cls(directory=directory)

        try:
            paths = sorted(path for path in game.directory.iterdir() if path.is_file())
        except OSError as e:
            raise SaveGameNotFoundError(f'Cannot read save directory {game.directory}: {e}') from e

        for path in paths:
            try:
                game.files.append(SaveFile.load(path))
            except (ValueError, LookupError, OSError) as e:
                log.debug(f'Skipping {path.name}: {e}')

        if not game.files:
            raise SaveGameNotFoundError(f'No save files found in {game.directory}')

        log.debug(f'Loaded {len(game.files)} of {len(paths)} files from {game.directory}')
        return game

    def save(self, directory: Path | None = None) -> None:
        """Save every file.

        Args:
            directory: If given, the save game and all of its files move to
                this directory (created if missing) before saving. The move is
                permanent, as with "save as".
        """
        if directory is not None:
            directory = Path(directory)
            directory.mkdir(parents=True, exist_ok=True)
            for save_file in self.files:
                save_file.save(directory)
            # Only a completed save moves the game
            self.directory = directory
        else:
            for save_file in self.files:
                save_file.save()

        log.info(f'Saved {len(self.files)} files to {self.directory}')

    def get_file(self, name: str) -> SaveFile | None:
        """Find a file by name (filename without extension)."""
        for save_file in self.files:
            if save_file.name == name:
                return save_file
        return None

    def __str__(self) -> str:
        return self.name
