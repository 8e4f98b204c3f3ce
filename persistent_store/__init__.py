from __future__ import annotations

from .errors import (
    CorruptStoreFileError,
    MissingStoreFileError,
    PersistentStoreError,
    StoreWriteError,
)
from .paths import EnvPathResolver, PathResolver, ResolvedPath, resolve_store_path
from .repositories import AsyncPersistentStore
from .settings import Settings, get_settings
from .store import PersistentStore, get_persistent, set_persistent

__all__ = [
    "AsyncPersistentStore",
    "CorruptStoreFileError",
    "EnvPathResolver",
    "MissingStoreFileError",
    "PathResolver",
    "PersistentStore",
    "PersistentStoreError",
    "ResolvedPath",
    "Settings",
    "StoreWriteError",
    "get_persistent",
    "get_settings",
    "resolve_store_path",
    "set_persistent",
]
