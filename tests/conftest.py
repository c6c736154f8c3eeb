from __future__ import annotations

import os
from pathlib import Path
import sys


import pytest


# Lets `import diskstash` resolve from a plain checkout, before `pip install -e .`.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_root(tmp_path: Path) -> Path:
    return tmp_path / "home"


@pytest.fixture
def store(sandbox_root: Path):
    """
    A LocalObjectStore whose cache and documents scopes live under tmp_path.
    """
    from diskstash import FixedDirectoryResolver, LocalObjectStore

    return LocalObjectStore(FixedDirectoryResolver(sandbox_root))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    # python-dotenv writes straight into os.environ; give each test its own copy.
    monkeypatch.setattr(os, "environ", dict(os.environ))
    for name in (
        "DISKSTASH_CACHE_DIR",
        "DISKSTASH_DOCUMENTS_DIR",
        "DISKSTASH_DATA_DIR_NAME",
        "DISKSTASH_ATOMIC_WRITES",
        "DISKSTASH_LOG_LEVEL",
        "XDG_CACHE_HOME",
        "XDG_DOCUMENTS_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
