from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from .interfaces import DirectoryResolver
from .settings import Settings

DATA_DIR_NAME = "Data"


class Scope(str, Enum):
    CACHE = "cache"
    DOCUMENTS = "documents"


class ContentKind(str, Enum):
    DICTIONARY = "dictionary"
    GENERIC = "generic"
    TEXT = "text"
    # Reserved: no save/load entry points.
    IMAGE = "image"

    @property
    def directory_root(self) -> str:
        return _DIRECTORY_ROOTS[self]


_DIRECTORY_ROOTS = {
    ContentKind.DICTIONARY: "Dictionary",
    ContentKind.GENERIC: "Generics",
    ContentKind.TEXT: "Texts",
    ContentKind.IMAGE: "Images",
}


def sanitize_name(name: str) -> str:
    return name.replace("/", "")


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def data_root(base_dir: Path, data_dir_name: str = DATA_DIR_NAME) -> Path:
    return base_dir / data_dir_name


def build_resource_path(
    base_dir: Path,
    kind: ContentKind,
    name: str,
    *,
    data_dir_name: str = DATA_DIR_NAME,
) -> Path:
    """
    <base_dir>/<data_dir_name>/<kind subdirectory>/<name without "/">
    """
    return data_root(base_dir, data_dir_name) / kind.directory_root / sanitize_name(name)


def _home() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        return None


class SystemDirectoryResolver(DirectoryResolver):
    """
    Per-user directories on the host:

    - cache:     settings.cache_dir, $XDG_CACHE_HOME, ~/.cache
    - documents: settings.documents_dir, $XDG_DOCUMENTS_DIR, ~/Documents
    """

    def __init__(self, settings: Settings | None = None):
        self._settings = settings

    def base_dir(self, scope: Scope) -> Path | None:
        if scope is Scope.CACHE:
            override = self._settings.cache_dir if self._settings else None
            env_name, fallback = "XDG_CACHE_HOME", ".cache"
        else:
            override = self._settings.documents_dir if self._settings else None
            env_name, fallback = "XDG_DOCUMENTS_DIR", "Documents"

        if override is not None:
            return override
        raw = os.getenv(env_name, "").strip()
        if raw:
            return Path(raw).expanduser()
        home = _home()
        return home / fallback if home is not None else None


class FixedDirectoryResolver(DirectoryResolver):
    """
    Resolves both scopes under a single root (root/Caches, root/Documents).
    """

    def __init__(self, root: Path):
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def base_dir(self, scope: Scope) -> Path | None:
        return self._root / ("Caches" if scope is Scope.CACHE else "Documents")
