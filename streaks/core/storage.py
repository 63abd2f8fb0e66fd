"""
Durable storage for the streak store.

A ``StateFile`` is the only thing that touches disk: it loads the raw text,
hands it to ``StreakStore.deserialize`` and writes ``serialize`` back.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

from .exceptions import StorageError
from .store import StreakStore
from ..utils.io import atomic_write, read_text

T = TypeVar("T")


class StateFile:
    """Reads and writes the line-oriented state file."""

    def __init__(self, path: Union[str, Path], logger: Optional[logging.Logger] = None):
        self.path = Path(path)
        self.logger = logger or logging.getLogger(__name__)

    def load_raw_text(self) -> str:
        """
        Return the persisted text; a missing file reads as empty.

        Raises:
            StorageError: If the file exists but cannot be read
        """
        try:
            text = read_text(str(self.path))
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"couldn't read state file {self.path}: {exc}") from exc
        self.logger.debug("Read %d bytes from %s", len(text), self.path)
        return text

    def save_raw_text(self, text: str) -> None:
        """
        Replace the persisted text.

        Raises:
            StorageError: If the file cannot be written
        """
        if not atomic_write(str(self.path), text):
            raise StorageError(f"couldn't write state file {self.path}")
        self.logger.debug("Wrote %d bytes to %s", len(text), self.path)

    def load_store(self, **collaborators) -> StreakStore:
        """
        Load the store from disk.

        Raises:
            StorageError: If the file cannot be read
            StateParseError: If the file is corrupt
        """
        return StreakStore.deserialize(self.load_raw_text(), **collaborators)

    def save_store(self, store: StreakStore) -> bool:
        """
        Persist the store.

        A failed save is reported once by ``atomic_write`` but not raised, so
        the command that produced the mutation still finishes.

        Returns:
            True if the state was written
        """
        try:
            self.save_raw_text(store.serialize())
        except StorageError as exc:
            self.logger.debug("Save failed: %s", exc)
            return False
        return True

    def modify(self, action: Callable[[StreakStore], T], **collaborators) -> T:
        """
        Load the store, apply one mutation and save it.

        Returns:
            Whatever ``action`` returned
        """
        store = self.load_store(**collaborators)
        result = action(store)
        self.save_store(store)
        return result
