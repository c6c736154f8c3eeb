from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from .object_store import DictionaryLoadCallback, GenericLoadCallback, LocalObjectStore, TextLoadCallback
from .paths import ContentKind, Scope
from .results import LoadResult


class AsyncLocalObjectStore:
    """
    Async wrapper around LocalObjectStore.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.

    Load callbacks run on the worker thread, before the awaited call completes.
    """

    def __init__(self, store: LocalObjectStore) -> None:
        self._store = store

    @property
    def store(self) -> LocalObjectStore:
        return self._store

    async def save_dictionary(self, value: dict[str, Any], scope: Scope, name: str, overwrite: bool = False) -> None:
        await asyncio.to_thread(self._store.save_dictionary, value, scope, name, overwrite)

    async def save_generic(self, value: bytes, scope: Scope, name: str, overwrite: bool = False) -> None:
        await asyncio.to_thread(self._store.save_generic, value, scope, name, overwrite)

    async def save_text(self, value: str, scope: Scope, name: str, overwrite: bool = False) -> None:
        await asyncio.to_thread(self._store.save_text, value, scope, name, overwrite)

    async def load_dictionary(
        self, name: str, scope: Scope, on_result: DictionaryLoadCallback | None = None
    ) -> LoadResult:
        return await asyncio.to_thread(self._store.load_dictionary, name, scope, on_result)

    async def load_generic(self, name: str, scope: Scope, on_result: GenericLoadCallback | None = None) -> LoadResult:
        return await asyncio.to_thread(self._store.load_generic, name, scope, on_result)

    async def load_text(self, name: str, scope: Scope, on_result: TextLoadCallback | None = None) -> LoadResult:
        return await asyncio.to_thread(self._store.load_text, name, scope, on_result)

    async def fetch_path_of(self, name: str, scope: Scope, kind: ContentKind) -> Path | None:
        return await asyncio.to_thread(self._store.fetch_path_of, name, scope, kind)

    async def exists(self, name: str, scope: Scope, kind: ContentKind) -> bool:
        return await asyncio.to_thread(self._store.exists, name, scope, kind)

    async def remove_resource(self, name: str, scope: Scope, kind: ContentKind) -> None:
        await asyncio.to_thread(self._store.remove_resource, name, scope, kind)

    async def remove_all_items(self, scope: Scope) -> None:
        await asyncio.to_thread(self._store.remove_all_items, scope)
