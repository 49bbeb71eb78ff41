from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Tuple

from mycocat.domain.entities import CompanyRecord, IndustryReport, ResearchArticleRecord
from mycocat.domain.ports import DatasetPort
from mycocat.domain.record_normalizer import (
    affiliate_match_keys,
    apply_affiliate,
    has_company_fields,
    normalize_article,
    normalize_company,
    normalize_report,
)

from .dataset_errors import DatasetFormatError, DatasetNotFoundError


class DatasetJson(DatasetPort):
    """Load the static catalog from JSON files in one directory.

    The company file is required. Affiliate, research and report files are
    optional and yield empty datasets when absent.
    """

    def __init__(
        self,
        root_dir: str = ".",
        *,
        companies_file: str = "companies_database.json",
        affiliates_file: str = "affiliate_companies.json",
        articles_file: str = "research_articles.json",
        reports_file: str = "industry_reports.json",
    ) -> None:
        self.root = root_dir
        self.companies_file = companies_file
        self.affiliates_file = affiliates_file
        self.articles_file = articles_file
        self.reports_file = reports_file
        self._log = logging.getLogger(__name__)

    # ---- Companies ----
    def load_companies(self) -> Tuple[CompanyRecord, ...]:
        rows = self._read_rows(self.companies_file, required=True)
        companies: List[CompanyRecord] = []
        index_by_id: Dict[str, int] = {}
        for position, row in enumerate(rows):
            company = self._build(normalize_company, row, self.companies_file, position)
            if company.id in index_by_id:
                raise DatasetFormatError(
                    f"Duplicate company id '{company.id}'.",
                    path=self._path(self.companies_file),
                    hint=f"row {position}",
                )
            index_by_id[company.id] = len(companies)
            companies.append(company)

        self._merge_affiliates(companies, index_by_id)
        self._log.info("Loaded %d companies from %s", len(companies), self._path(self.companies_file))
        return tuple(companies)

    def _merge_affiliates(self, companies: List[CompanyRecord], index_by_id: Dict[str, int]) -> None:
        rows = self._read_rows(self.affiliates_file, required=False)
        if not rows:
            return
        index_by_name = {company.name.casefold(): idx for idx, company in enumerate(companies)}
        merged = added = skipped = 0
        for position, row in enumerate(rows):
            if not isinstance(row, Mapping):
                raise DatasetFormatError(
                    "Affiliate row must be a JSON object.",
                    path=self._path(self.affiliates_file),
                    hint=f"row {position}",
                )
            row_id, row_name = affiliate_match_keys(row)
            idx = index_by_id.get(row_id) if row_id else None
            if idx is None and row_name:
                idx = index_by_name.get(row_name)
            if idx is not None:
                companies[idx] = apply_affiliate(companies[idx], row)
                merged += 1
            elif has_company_fields(row):
                company = self._build(normalize_company, row, self.affiliates_file, position)
                company = apply_affiliate(company, row)
                index_by_id[company.id] = len(companies)
                index_by_name[company.name.casefold()] = len(companies)
                companies.append(company)
                added += 1
            else:
                skipped += 1
                self._log.warning(
                    "Skipping affiliate row %d: no matching company for id=%r name=%r",
                    position,
                    row.get("id"),
                    row.get("name"),
                )
        self._log.info("Affiliates: %d merged, %d added, %d skipped", merged, added, skipped)

    # ---- Research articles ----
    def load_articles(self) -> Tuple[ResearchArticleRecord, ...]:
        rows = self._read_rows(self.articles_file, required=False)
        articles = tuple(
            self._build(lambda raw, i=position: normalize_article(raw, index=i), row, self.articles_file, position)
            for position, row in enumerate(rows)
        )
        self._log.info("Loaded %d research rows from %s", len(articles), self._path(self.articles_file))
        return articles

    # ---- Industry reports ----
    def load_reports(self) -> Tuple[IndustryReport, ...]:
        rows = self._read_rows(self.reports_file, required=False)
        reports = tuple(
            self._build(normalize_report, row, self.reports_file, position)
            for position, row in enumerate(rows)
        )
        self._log.debug("Loaded %d industry reports", len(reports))
        return reports

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _path(self, name: str) -> str:
        return os.path.join(self.root, name)

    def _read_rows(self, name: str, *, required: bool) -> List[Any]:
        path = self._path(name)
        if not os.path.exists(path):
            if required:
                raise DatasetNotFoundError(f"Dataset file not found: {path}", path=path)
            self._log.info("Optional dataset %s not present", path)
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError as exc:
            raise DatasetFormatError(
                f"Invalid JSON in {path}", path=path, hint=f"line {exc.lineno}: {exc.msg}"
            ) from exc
        if not isinstance(payload, list):
            raise DatasetFormatError(f"{path} must contain a JSON array.", path=path)
        return payload

    def _build(self, factory, row: Any, name: str, position: int) -> Any:
        try:
            return factory(row)
        except (TypeError, ValueError) as exc:
            raise DatasetFormatError(
                f"Invalid record in {name}",
                path=self._path(name),
                hint=f"row {position}: {exc}",
                payload=row,
            ) from exc


def default_data_dir() -> str:
    """Directory holding the sample dataset shipped with the package."""
    return os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data")


def resolve_data_dir(explicit: Optional[str] = None) -> str:
    """Pick the data directory: explicit value, ``MYCOCAT_DATA_DIR``, or the bundled sample."""
    if explicit and explicit.strip():
        return explicit.strip()
    env_dir = os.environ.get("MYCOCAT_DATA_DIR", "").strip()
    return env_dir or default_data_dir()


__all__ = ["DatasetJson", "default_data_dir", "resolve_data_dir"]
