from __future__ import annotations

from pathlib import Path

import pytest

from diskstash.paths import (
    ContentKind,
    FixedDirectoryResolver,
    Scope,
    SystemDirectoryResolver,
    build_resource_path,
    sanitize_name,
)
from diskstash.settings import Settings


def _settings(**overrides) -> Settings:
    values = dict(cache_dir=None, documents_dir=None, data_dir_name="Data", atomic_writes=True, log_level=None)
    values.update(overrides)
    return Settings(**values)


def test_content_kind_directory_roots():
    assert ContentKind.DICTIONARY.directory_root == "Dictionary"
    assert ContentKind.GENERIC.directory_root == "Generics"
    assert ContentKind.TEXT.directory_root == "Texts"
    assert ContentKind.IMAGE.directory_root == "Images"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("plain", "plain"),
        ("a/b/c", "abc"),
        ("../../etc/passwd", "....etcpasswd"),
        ("/", ""),
        ("spaces and UPPER", "spaces and UPPER"),
    ],
)
def test_sanitize_name_only_strips_slashes(name, expected):
    assert sanitize_name(name) == expected


def test_build_resource_path_layout(tmp_path: Path):
    path = build_resource_path(tmp_path, ContentKind.TEXT, "notes/today")
    assert path == tmp_path / "Data" / "Texts" / "notestoday"
    assert path.relative_to(tmp_path).parts == ("Data", "Texts", "notestoday")


def test_build_resource_path_custom_data_dir(tmp_path: Path):
    path = build_resource_path(tmp_path, ContentKind.GENERIC, "blob", data_dir_name="Store")
    assert path == tmp_path / "Store" / "Generics" / "blob"


def test_fixed_resolver_separates_scopes(tmp_path: Path):
    resolver = FixedDirectoryResolver(tmp_path)
    assert resolver.base_dir(Scope.CACHE) == tmp_path / "Caches"
    assert resolver.base_dir(Scope.DOCUMENTS) == tmp_path / "Documents"


def test_system_resolver_prefers_settings(clean_env, tmp_path: Path):
    clean_env.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg"))
    resolver = SystemDirectoryResolver(_settings(cache_dir=tmp_path / "c", documents_dir=tmp_path / "d"))
    assert resolver.base_dir(Scope.CACHE) == tmp_path / "c"
    assert resolver.base_dir(Scope.DOCUMENTS) == tmp_path / "d"


def test_system_resolver_uses_xdg_variables(clean_env, tmp_path: Path):
    clean_env.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    clean_env.setenv("XDG_DOCUMENTS_DIR", str(tmp_path / "docs"))
    resolver = SystemDirectoryResolver()
    assert resolver.base_dir(Scope.CACHE) == tmp_path / "cache"
    assert resolver.base_dir(Scope.DOCUMENTS) == tmp_path / "docs"


def test_system_resolver_falls_back_to_home(clean_env, tmp_path: Path):
    clean_env.setenv("HOME", str(tmp_path))
    resolver = SystemDirectoryResolver()
    assert resolver.base_dir(Scope.CACHE) == tmp_path / ".cache"
    assert resolver.base_dir(Scope.DOCUMENTS) == tmp_path / "Documents"


def test_system_resolver_without_home(clean_env, monkeypatch: pytest.MonkeyPatch):
    def _no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(_no_home))
    resolver = SystemDirectoryResolver()
    assert resolver.base_dir(Scope.CACHE) is None
    assert resolver.base_dir(Scope.DOCUMENTS) is None
