from __future__ import annotations

from pathlib import Path


class PersistentStoreError(Exception):
    """Base class for failures while reading or writing a store file."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = str(path)


class MissingStoreFileError(PersistentStoreError, FileNotFoundError):
    """Raised by reads when the resolved store file does not exist."""

    def __init__(self, message: str, path: str | Path, source: str) -> None:
        super().__init__(message, path)
        self.source = source


class CorruptStoreFileError(PersistentStoreError, ValueError):
    """The file exists but does not hold a JSON object."""


class StoreWriteError(PersistentStoreError, OSError):
    """The snapshot could not be written to disk."""
