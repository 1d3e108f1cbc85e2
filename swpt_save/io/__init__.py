"""Binary IO utilities for save file parsing."""

from swpt_save.io.reader import Reader
from swpt_save.io.writer import Writer

__all__ = ['Reader', 'Writer']
