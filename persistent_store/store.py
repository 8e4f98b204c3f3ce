from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable

from .disk_store import DiskJsonDocumentStore
from .errors import MissingStoreFileError
from .interfaces import KeyValueDocumentStore
from .paths import EnvPathResolver, PathResolver, ResolvedPath
from .settings import DEFAULT_FILENAME, PERSISTENT_FILE_ENV

logger = logging.getLogger(__name__)

DocumentStoreFactory = Callable[[Path], KeyValueDocumentStore]


def apply_mutation(data: dict[str, Any], key: str, value: Any) -> bool:
    """
    None removes key (a no-op when it is absent); anything else replaces the
    stored value wholesale. Returns False only when removing an absent key.
    """
    if value is None:
        if key not in data:
            return False
        del data[key]
        return True
    data[key] = value
    return True


def missing_file_message(resolved: ResolvedPath) -> str:
    return (
        f"The requested data file '{resolved.path}' doesn't exist.\n"
        f"  The file location and name were determined {resolved.describe_source()}.\n"
        f"  The default file is '~/{DEFAULT_FILENAME}'.\n"
        "  To read data from a specific file, pass the full file name as the 'filename' argument\n"
        f"    or set the '{PERSISTENT_FILE_ENV}' environment variable."
    )


class PersistentStore:
    """
    Named values kept in a JSON file so they survive across runs.

    Every call reloads the whole file; set() rewrites it. There is no locking
    around the load/save pair, so two processes writing the same file at once
    can lose one of the updates.
    """

    def __init__(
        self,
        resolver: PathResolver | None = None,
        document_store_factory: DocumentStoreFactory = DiskJsonDocumentStore,
    ) -> None:
        self._resolver = resolver or EnvPathResolver()
        self._document_store_factory = document_store_factory

    def resolve(self, filename: str | os.PathLike[str] | None = None) -> ResolvedPath:
        return self._resolver(filename)

    def set(self, key: str, value: Any, filename: str | os.PathLike[str] | None = None) -> str:
        """
        Add, replace or (with value=None) remove key in the store file.

        Returns the path of the file that was written.
        """
        resolved = self.resolve(filename)
        doc_store = self._document_store_factory(Path(resolved.path))
        if not doc_store.exists():
            logger.info("STORE SET: creating new store file %s", resolved.path)
        data = doc_store.load()
        changed = apply_mutation(data, key, value)
        if value is None and not changed:
            logger.debug("STORE SET: key %r not present in %s, nothing to remove", key, resolved.path)
        doc_store.save(data)
        return resolved.path

    def get(self, key: str | None = None, filename: str | os.PathLike[str] | None = None) -> Any:
        """
        Return the value stored under key, or None if it is not stored.

        With key=None, return the list of stored key names instead. Raises
        MissingStoreFileError when the store file does not exist.
        """
        resolved = self.resolve(filename)
        doc_store = self._document_store_factory(Path(resolved.path))
        if not doc_store.exists():
            raise MissingStoreFileError(missing_file_message(resolved), resolved.path, resolved.source)
        data = doc_store.load()
        if key is None:
            return list(data)
        return data.get(key)

    def keys(self, filename: str | os.PathLike[str] | None = None) -> list[str]:
        return self.get(None, filename)


_default_store = PersistentStore()


def set_persistent(key: str, value: Any, filename: str | os.PathLike[str] | None = None) -> str:
    return _default_store.set(key, value, filename)


def get_persistent(key: str | None = None, filename: str | os.PathLike[str] | None = None) -> Any:
    return _default_store.get(key, filename)
