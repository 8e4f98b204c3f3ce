from __future__ import annotations

import asyncio
import os
from typing import Any

from .store import PersistentStore


class AsyncPersistentStore:
    """
    Async wrapper around PersistentStore.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: PersistentStore | None = None) -> None:
        self._store = store or PersistentStore()

    async def set(self, key: str, value: Any, filename: str | os.PathLike[str] | None = None) -> str:
        return await asyncio.to_thread(self._store.set, key, value, filename)

    async def get(self, key: str | None = None, filename: str | os.PathLike[str] | None = None) -> Any:
        return await asyncio.to_thread(self._store.get, key, filename)

    async def keys(self, filename: str | os.PathLike[str] | None = None) -> list[str]:
        return await asyncio.to_thread(self._store.keys, filename)
