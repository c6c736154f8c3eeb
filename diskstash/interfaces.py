from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .paths import Scope


class DirectoryResolver(Protocol):
    """
    Resolves the per-user base directory backing a storage scope.
    """

    def base_dir(self, scope: "Scope") -> Path | None:
        """Return the base directory for `scope`, or None when it cannot be determined."""
        ...
