from __future__ import annotations

import os
import pickle
import tempfile
from pathlib import Path
from typing import Any

from .paths import ensure_dir


class ArchiveEncodeError(ValueError):
    """Raised when an object cannot be archived."""


class ArchiveDecodeError(ValueError):
    """Raised when an archived payload cannot be turned back into an object."""


def archive(obj: Any) -> bytes:
    try:
        return pickle.dumps(obj, protocol=pickle.HIGHEST_PROTOCOL)
    except (pickle.PicklingError, TypeError, AttributeError) as exc:
        raise ArchiveEncodeError(str(exc) or type(exc).__name__) from exc


def unarchive(data: bytes) -> Any:
    """
    Decode a payload produced by `archive`.

    Every unpickling failure is reported as ArchiveDecodeError.
    """
    try:
        return pickle.loads(data)
    except Exception as exc:
        raise ArchiveDecodeError(str(exc) or type(exc).__name__) from exc


def read_bytes(path: Path) -> bytes | None:
    """
    Read a file's raw bytes.

    Returns None for missing files. Other OSErrors propagate.
    """
    if not path.exists():
        return None
    return path.read_bytes()


def write_bytes(path: Path, payload: bytes, *, atomic: bool = True) -> None:
    """
    Write bytes to disk, creating parent directories.

    With `atomic`, the payload goes to a temp file in the same directory which
    then replaces `path`.
    """
    ensure_dir(path.parent)
    if not atomic:
        path.write_bytes(payload)
        return

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
        tmp_path.replace(path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
