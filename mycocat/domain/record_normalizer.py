"""Normalize raw JSON rows into immutable domain records."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Any, Mapping, Optional, Sequence, Tuple

from .entities import CompanyRecord, IndustryReport, ResearchArticleRecord
from .query import SENTINEL_CATEGORY


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def _optional_text(value: Any) -> Optional[str]:
    token = _text(value)
    return token or None


def _identifier(raw: Mapping[str, Any], fallback: Optional[int] = None) -> str:
    token = _text(raw.get("id"))
    if token:
        return token
    if fallback is not None:
        return str(fallback)
    raise ValueError("Record is missing an 'id'.")


def _coerce_year(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    token = _text(value)
    if not token:
        return None
    try:
        number = float(token)
    except ValueError:
        return None
    return int(number) if math.isfinite(number) else None


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _coerce_keywords(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        items: Sequence[Any] = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        items = [value]
    return tuple(token for token in (_text(item) for item in items) if token)


def _normalize_innovation(value: Any) -> str:
    token = _text(value)
    return token[:1].upper() + token[1:].lower() if token else token


def normalize_company(raw: Mapping[str, Any]) -> CompanyRecord:
    """Build a :class:`CompanyRecord` from one ``companies_database.json`` row.

    Raises:
        ValueError: When required fields are missing or invalid.
    """
    if not isinstance(raw, Mapping):
        raise ValueError("Company row must be a JSON object.")
    record_id = _identifier(raw)
    founded = _coerce_year(raw.get("founded"))
    if founded is None:
        raise ValueError(f"Company '{record_id}' has no numeric founding year.")
    return CompanyRecord(
        id=record_id,
        name=_text(raw.get("name")),
        industry=_text(raw.get("industry")),
        country=_text(raw.get("country")),
        founded=founded,
        employees=_text(raw.get("employees")),
        products=_text(raw.get("products")),
        description=_text(raw.get("description")),
        technologies=_text(raw.get("technologies")),
        business_model=_text(raw.get("businessModel")),
        target=_text(raw.get("target")),
        innovation=_normalize_innovation(raw.get("innovation")),
        stage=_text(raw.get("stage")),
        website=_optional_text(raw.get("website")),
        affiliate=_coerce_bool(raw.get("affiliate", raw.get("isAffiliate", False))),
        affiliate_url=_optional_text(raw.get("affiliateUrl")),
        discount_code=_optional_text(raw.get("discountCode")),
        discount_text=_optional_text(raw.get("discount")),
    )


def affiliate_match_keys(raw: Mapping[str, Any]) -> Tuple[str, str]:
    """Return ``(id, casefolded name)`` used to find the company an affiliate row overlays.

    Missing or null values come back as empty strings, which never match.
    """
    return _text(raw.get("id")), _text(raw.get("name")).casefold()


def apply_affiliate(company: CompanyRecord, raw: Mapping[str, Any]) -> CompanyRecord:
    """Return ``company`` with affiliate fields taken from an affiliate row."""
    return replace(
        company,
        affiliate=True,
        affiliate_url=_optional_text(raw.get("affiliateUrl")) or company.affiliate_url,
        discount_code=_optional_text(raw.get("discountCode")) or company.discount_code,
        discount_text=_optional_text(raw.get("discount")) or company.discount_text,
        website=company.website or _optional_text(raw.get("website")),
    )


def has_company_fields(raw: Mapping[str, Any]) -> bool:
    """Return True when an affiliate row carries enough data to stand alone."""
    return all(_text(raw.get(key)) for key in ("id", "name", "industry", "founded"))


def normalize_article(raw: Mapping[str, Any], *, index: int) -> ResearchArticleRecord:
    """Build a :class:`ResearchArticleRecord`; placeholder rows pass through untouched.

    ``index`` is used as identifier when the row carries none.
    """
    if not isinstance(raw, Mapping):
        raise ValueError("Research row must be a JSON object.")
    category = _text(raw.get("category"))
    title = _text(raw.get("title"))
    if not title and category != SENTINEL_CATEGORY:
        raise ValueError(f"Research row {index} has no title.")
    return ResearchArticleRecord(
        id=_identifier(raw, fallback=index),
        title=title,
        authors=_text(raw.get("authors")),
        journal=_text(raw.get("journal")),
        year=_coerce_year(raw.get("year")),
        category=category,
        subcategory=_text(raw.get("subcategory")),
        type=_text(raw.get("type")),
        summary=_text(raw.get("summary")),
        keywords=_coerce_keywords(raw.get("keywords")),
        url=_text(raw.get("url")),
    )


def normalize_report(raw: Mapping[str, Any]) -> IndustryReport:
    if not isinstance(raw, Mapping):
        raise ValueError("Report row must be a JSON object.")
    title = _text(raw.get("title"))
    if not title:
        raise ValueError("Report row has no title.")
    highlights = raw.get("highlights") or ()
    if not isinstance(highlights, (list, tuple)):
        raise ValueError(f"Report '{title}' highlights must be a list.")
    return IndustryReport(
        title=title,
        description=_text(raw.get("description")),
        highlights=tuple(_text(item) for item in highlights if _text(item)),
        url=_text(raw.get("url")),
    )


__all__ = [
    "affiliate_match_keys",
    "apply_affiliate",
    "has_company_fields",
    "normalize_article",
    "normalize_company",
    "normalize_report",
]
