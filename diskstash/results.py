from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel


class LoadStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    READ_ERROR = "read_error"
    DECODE_ERROR = "decode_error"


class LoadResult(BaseModel):
    """
    Outcome of a load: the decoded value on OK, otherwise why there is none.
    """

    status: LoadStatus
    value: Any = None
    path: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.OK

    @classmethod
    def found(cls, value: Any, path: Path) -> "LoadResult":
        return cls(status=LoadStatus.OK, value=value, path=path)

    @classmethod
    def not_found(cls, path: Path | None = None) -> "LoadResult":
        return cls(status=LoadStatus.NOT_FOUND, path=path)

    @classmethod
    def failed(cls, status: LoadStatus, path: Path, error: BaseException) -> "LoadResult":
        return cls(status=status, path=path, error=str(error) or type(error).__name__)
