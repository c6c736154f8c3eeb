from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    return default if raw is None else raw.strip().lower() in _TRUTHY


def _env_path(name: str) -> Path | None:
    raw = (os.getenv(name) or "").strip()
    return Path(raw).expanduser() if raw else None


def _env_log_level(name: str) -> str | None:
    raw = (os.getenv(name) or "").strip().upper()
    # getLevelName maps registered names to their int value
    if raw and isinstance(logging.getLevelName(raw), int):
        return raw
    return None


@dataclass(frozen=True)
class Settings:
    # Base directory overrides (None -> host per-user directories)
    cache_dir: Path | None
    documents_dir: Path | None

    # Layout
    data_dir_name: str

    # Writes go through a temp file + os.replace when on
    atomic_writes: bool

    # Applied to the "diskstash" logger by create_store; unknown names are dropped
    log_level: str | None


def get_settings() -> Settings:
    cache_dir = _env_path("DISKSTASH_CACHE_DIR")
    documents_dir = _env_path("DISKSTASH_DOCUMENTS_DIR")

    data_dir_name = (os.getenv("DISKSTASH_DATA_DIR_NAME", "Data")).strip().replace("/", "") or "Data"

    atomic_writes = _env_bool("DISKSTASH_ATOMIC_WRITES", True)

    log_level = _env_log_level("DISKSTASH_LOG_LEVEL")

    return Settings(
        cache_dir=cache_dir,
        documents_dir=documents_dir,
        data_dir_name=data_dir_name,
        atomic_writes=atomic_writes,
        log_level=log_level,
    )
