from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import CorruptStoreFileError, StoreWriteError
from .interfaces import KeyValueDocumentStore
from .json_store import atomic_write_json, read_json
from .snapshot import PersistentData

logger = logging.getLogger(__name__)


class DiskJsonDocumentStore(KeyValueDocumentStore):
    """
    Stores a single JSON document on disk at a fixed path.

    - A leading ~ in the path refers to the user's home directory.
    - Returns an empty dict when the file is missing.
    - Raises CorruptStoreFileError for unreadable, empty, invalid or non-object JSON.
    - Writes atomically; the parent directory must already exist.
    """

    def __init__(self, path: Path):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> dict[str, Any]:
        try:
            raw = read_json(self._path)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("STORE LOAD: %s is not valid JSON: %s", self._path, e)
            raise CorruptStoreFileError(f"Store file '{self._path}' could not be decoded: {e}", self._path) from e
        except OSError as e:
            logger.warning("STORE LOAD: %s could not be read: %s", self._path, e)
            raise CorruptStoreFileError(f"Store file '{self._path}' could not be read: {e}", self._path) from e
        if raw is None:
            return {}
        try:
            data = PersistentData.from_disk_doc(raw)
        except ValidationError as e:
            logger.warning("STORE LOAD: %s does not hold a JSON object", self._path)
            raise CorruptStoreFileError(
                f"Store file '{self._path}' does not contain a JSON object of named values", self._path
            ) from e
        logger.debug("STORE LOAD: %s (%d entries)", self._path, len(data.root))
        return data.root

    def save(self, doc: dict[str, Any]) -> None:
        try:
            payload = PersistentData(doc).to_disk_doc()
        except (TypeError, ValueError) as e:
            raise StoreWriteError(f"Values for '{self._path}' cannot be stored as JSON: {e}", self._path) from e
        try:
            atomic_write_json(self._path, payload)
        except (OSError, TypeError, ValueError) as e:
            raise StoreWriteError(f"Could not write store file '{self._path}': {e}", self._path) from e
        logger.debug("STORE SAVE: %s (%d entries)", self._path, len(payload))
