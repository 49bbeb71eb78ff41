from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Optional

from ..domain.query import (
    ARTICLE_SORT_KEYS,
    COMPANY_SORT_KEYS,
    DEFAULT_ARTICLE_SORT,
    DEFAULT_COMPANY_SORT,
)


@dataclass
class SettingsConfig:
    """Typed runtime settings that persist via StorageLocal."""

    data_dir: str = ""
    companies_file: str = "companies_database.json"
    affiliates_file: str = "affiliate_companies.json"
    articles_file: str = "research_articles.json"
    reports_file: str = "industry_reports.json"
    default_company_sort: str = DEFAULT_COMPANY_SORT
    default_article_sort: str = DEFAULT_ARTICLE_SORT


_FILE_KEYS = ("companies_file", "affiliates_file", "articles_file", "reports_file")


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig()
        self.debug_logging: bool = False

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def data_dir(self) -> str:
        return self.config.data_dir

    @data_dir.setter
    def data_dir(self, value: str) -> None:
        self.config = replace(self.config, data_dir=self._coerce_dir(value))

    @property
    def default_company_sort(self) -> str:
        return self.config.default_company_sort

    @default_company_sort.setter
    def default_company_sort(self, value: str) -> None:
        coerced = self._coerce_choice("default_company_sort", value, COMPANY_SORT_KEYS)
        self.config = replace(self.config, default_company_sort=coerced)

    @property
    def default_article_sort(self) -> str:
        return self.config.default_article_sort

    @default_article_sort.setter
    def default_article_sort(self, value: str) -> None:
        coerced = self._coerce_choice("default_article_sort", value, ARTICLE_SORT_KEYS)
        self.config = replace(self.config, default_article_sort=coerced)

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed_keys = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed_keys
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates = {
            key: self._coerce_config_value(key, payload[key])
            for key in SettingsConfig.__annotations__.keys()
            if key in payload
        }
        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "data_dir":
            return self._coerce_dir(raw)
        if key in _FILE_KEYS:
            return self._coerce_filename(key, raw)
        if key == "default_company_sort":
            return self._coerce_choice(key, raw, COMPANY_SORT_KEYS)
        if key == "default_article_sort":
            return self._coerce_choice(key, raw, ARTICLE_SORT_KEYS)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_dir(value: Any) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValueError("data_dir must be a string path.")
        return value.strip()

    @staticmethod
    def _coerce_filename(name: str, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{name} must be a non-empty file name.")
        return value.strip()

    @staticmethod
    def _coerce_choice(name: str, value: Any, choices: tuple) -> str:
        token = str(value or "").strip().lower()
        if token not in choices:
            raise ValueError(f"{name} must be one of: {', '.join(choices)}.")
        return token

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)


def default_settings_payload() -> dict:
    """Return a fresh snapshot containing the default settings payload."""
    return SettingsVM().to_dict()
