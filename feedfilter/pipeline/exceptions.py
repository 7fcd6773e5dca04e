"""Exceptions raised while loading candidate items."""

from pathlib import Path
from typing import Optional


class ItemsFileError(Exception):
    """Raised when an items file cannot be read or holds invalid items.

    Attributes:
        path: File that failed to load
        index: Position of the offending item, if a single item was at fault
    """

    def __init__(self, message: str, path: Path, index: Optional[int] = None):
        self.message = message
        self.path = path
        self.index = index
        location = f"{path}" if index is None else f"{path} [item {index}]"
        super().__init__(f"{location}: {message}")
