from __future__ import annotations

import logging

from dotenv import load_dotenv

from .interfaces import DirectoryResolver
from .object_store import LocalObjectStore, can_write_to_disk
from .paths import ContentKind, FixedDirectoryResolver, Scope, SystemDirectoryResolver, sanitize_name
from .repositories import AsyncLocalObjectStore
from .results import LoadResult, LoadStatus
from .settings import Settings, get_settings


def create_store(env_file: str | None = "local.env") -> LocalObjectStore:
    """
    Build a store on the host's per-user directories, configured from the
    environment (and `env_file`, when it exists).
    """
    if env_file:
        load_dotenv(env_file)
    settings = get_settings()
    if settings.log_level:
        logging.getLogger(__name__).setLevel(settings.log_level)
    return LocalObjectStore(
        SystemDirectoryResolver(settings),
        data_dir_name=settings.data_dir_name,
        atomic_writes=settings.atomic_writes,
    )


__all__ = [
    "AsyncLocalObjectStore",
    "ContentKind",
    "DirectoryResolver",
    "FixedDirectoryResolver",
    "LoadResult",
    "LoadStatus",
    "LocalObjectStore",
    "Scope",
    "Settings",
    "SystemDirectoryResolver",
    "can_write_to_disk",
    "create_store",
    "get_settings",
    "sanitize_name",
]
