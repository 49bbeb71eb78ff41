from __future__ import annotations
from typing import Dict, Optional, Protocol, Sequence

from .entities import CompanyRecord, IndustryReport, ResearchArticleRecord


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[Dict] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta


# ---- Ports ----
class DatasetPort(Protocol):
    """Read-only access to the static catalog datasets."""

    def load_companies(self) -> Sequence[CompanyRecord]: ...
    def load_articles(self) -> Sequence[ResearchArticleRecord]: ...
    def load_reports(self) -> Sequence[IndustryReport]: ...


class StoragePort(Protocol):
    """Persistence for user settings."""

    def save_user_settings(self, payload: Dict) -> None: ...
    def load_user_settings(self) -> Dict: ...
