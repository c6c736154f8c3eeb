from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any, Callable, Optional

from .archive_io import ArchiveDecodeError, ArchiveEncodeError, archive, read_bytes, unarchive, write_bytes
from .interfaces import DirectoryResolver
from .paths import DATA_DIR_NAME, ContentKind, Scope, build_resource_path, data_root
from .results import LoadResult, LoadStatus

logger = logging.getLogger(__name__)

DictionaryLoadCallback = Callable[[Optional[dict[str, Any]]], None]
GenericLoadCallback = Callable[[Optional[bytes]], None]
TextLoadCallback = Callable[[Optional[str]], None]


def can_write_to_disk(overwrite: bool, file_exists: bool) -> bool:
    # Only (overwrite=False, file_exists=True) refuses.
    return overwrite or not file_exists


class LocalObjectStore:
    """
    Stores dictionaries, byte blobs and text under
    <base_dir(scope)>/Data/<kind subdirectory>/<name>.

    Every call is synchronous. Load callbacks run inline, before the call returns.
    Saves never raise: write failures are logged and dropped. Loads never raise
    either; the returned LoadResult says why a value is missing.
    """

    def __init__(
        self,
        resolver: DirectoryResolver,
        *,
        data_dir_name: str = DATA_DIR_NAME,
        atomic_writes: bool = True,
    ):
        self._resolver = resolver
        self._data_dir_name = data_dir_name
        self._atomic_writes = atomic_writes

    @property
    def resolver(self) -> DirectoryResolver:
        return self._resolver

    # -------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------
    def scope_root(self, scope: Scope) -> Path | None:
        base = self._resolver.base_dir(scope)
        if base is None:
            logger.debug("No base directory for scope %s", scope.value)
            return None
        return data_root(base, self._data_dir_name)

    def resource_path(self, name: str, scope: Scope, kind: ContentKind) -> Path | None:
        base = self._resolver.base_dir(scope)
        if base is None:
            logger.debug("No base directory for scope %s", scope.value)
            return None
        return build_resource_path(base, kind, name, data_dir_name=self._data_dir_name)

    def fetch_path_of(self, name: str, scope: Scope, kind: ContentKind) -> Path | None:
        path = self.resource_path(name, scope, kind)
        if path is None or not path.is_file():
            return None
        return path

    def exists(self, name: str, scope: Scope, kind: ContentKind) -> bool:
        return self.fetch_path_of(name, scope, kind) is not None

    # -------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------
    def save_dictionary(self, value: dict[str, Any], scope: Scope, name: str, overwrite: bool = False) -> None:
        self._save(ContentKind.DICTIONARY, lambda: archive(value), scope, name, overwrite)

    def save_generic(self, value: bytes, scope: Scope, name: str, overwrite: bool = False) -> None:
        self._save(ContentKind.GENERIC, lambda: value, scope, name, overwrite)

    def save_text(self, value: str, scope: Scope, name: str, overwrite: bool = False) -> None:
        self._save(ContentKind.TEXT, lambda: archive(value), scope, name, overwrite)

    def _save(
        self,
        kind: ContentKind,
        encode: Callable[[], bytes],
        scope: Scope,
        name: str,
        overwrite: bool,
    ) -> None:
        path = self.resource_path(name, scope, kind)
        if path is None:
            return

        if not can_write_to_disk(overwrite, path.is_file()):
            logger.debug("Keeping existing %s (overwrite disabled)", path)
            return

        try:
            payload = encode()
        except ArchiveEncodeError as exc:
            logger.error("Could not encode %s resource %r: %s", kind.value, name, exc)
            return

        try:
            write_bytes(path, payload, atomic=self._atomic_writes)
        except (OSError, ValueError) as exc:
            logger.error("Failed to write %s: %s", path, exc)

    # -------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------
    def load_dictionary(
        self, name: str, scope: Scope, on_result: DictionaryLoadCallback | None = None
    ) -> LoadResult:
        return self._load(ContentKind.DICTIONARY, _decode_dictionary, name, scope, on_result)

    def load_generic(self, name: str, scope: Scope, on_result: GenericLoadCallback | None = None) -> LoadResult:
        return self._load(ContentKind.GENERIC, bytes, name, scope, on_result)

    def load_text(self, name: str, scope: Scope, on_result: TextLoadCallback | None = None) -> LoadResult:
        return self._load(ContentKind.TEXT, _decode_text, name, scope, on_result)

    def _load(
        self,
        kind: ContentKind,
        decode: Callable[[bytes], Any],
        name: str,
        scope: Scope,
        on_result: Callable[[Any], None] | None,
    ) -> LoadResult:
        result = self._read(kind, decode, name, scope)
        if on_result is not None:
            on_result(result.value)
        return result

    def _read(self, kind: ContentKind, decode: Callable[[bytes], Any], name: str, scope: Scope) -> LoadResult:
        path = self.fetch_path_of(name, scope, kind)
        if path is None:
            return LoadResult.not_found(self.resource_path(name, scope, kind))

        try:
            raw = read_bytes(path)
        except OSError as exc:
            logger.warning("Failed to read %s: %s", path, exc)
            return LoadResult.failed(LoadStatus.READ_ERROR, path, exc)
        if raw is None:
            # removed between the probe and the read
            return LoadResult.not_found(path)

        try:
            value = decode(raw)
        except ArchiveDecodeError as exc:
            logger.warning("Failed to decode %s: %s", path, exc)
            return LoadResult.failed(LoadStatus.DECODE_ERROR, path, exc)
        return LoadResult.found(value, path)

    # -------------------------------------------------------------------
    # Removing
    # -------------------------------------------------------------------
    def remove_resource(self, name: str, scope: Scope, kind: ContentKind) -> None:
        path = self.fetch_path_of(name, scope, kind)
        if path is None:
            return
        try:
            path.unlink()
        except OSError as exc:
            logger.debug("Ignoring failed removal of %s: %s", path, exc)

    def remove_all_items(self, scope: Scope) -> None:
        root = self.scope_root(scope)
        if root is None:
            return
        try:
            shutil.rmtree(root)
        except OSError as exc:
            logger.debug("Ignoring failed removal of %s: %s", root, exc)


def _decode_dictionary(raw: bytes) -> dict[str, Any]:
    value = unarchive(raw)
    if not isinstance(value, dict):
        raise ArchiveDecodeError(f"expected a dictionary, found {type(value).__name__}")
    return value


def _decode_text(raw: bytes) -> str:
    value = unarchive(raw)
    if not isinstance(value, str):
        raise ArchiveDecodeError(f"expected text, found {type(value).__name__}")
    return value
