from __future__ import annotations

from typing import Any, Optional


class DatasetError(RuntimeError):
    """Base class for dataset loading failures."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        hint: Optional[str] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.hint = hint
        self.payload = payload


class DatasetNotFoundError(DatasetError):
    """A required dataset file does not exist."""


class DatasetFormatError(DatasetError):
    """A dataset file is not valid JSON or holds invalid records."""
