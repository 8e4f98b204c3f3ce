from __future__ import annotations

import asyncio

import pytest

from persistent_store import AsyncPersistentStore, MissingStoreFileError


def test_async_store_roundtrip(store_file):
    async def _run():
        store = AsyncPersistentStore()

        with pytest.raises(MissingStoreFileError):
            await store.get("k", store_file)

        assert await store.set("k", {"port": 3306}, store_file) == str(store_file)
        assert await store.get("k", store_file) == {"port": 3306}
        assert await store.keys(store_file) == ["k"]

        await store.set("k", None, store_file)
        assert await store.get("k", store_file) is None
        assert await store.keys(store_file) == []

    asyncio.run(_run())
