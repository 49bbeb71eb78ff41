"""Display labeling helpers for catalog cards, stats and dropdowns.

Call context:
    ``CompanyBrowserVM``, ``ResearchBrowserVM`` and the NiceGUI pages call
    these helpers so that wording stays consistent across views.
"""

from __future__ import annotations

from typing import Optional

from ..domain.entities import CompanyRecord, ResearchArticleRecord


def count_label(label: str, count: int) -> str:
    return f"{label} ({count})"


def company_subtitle(company: CompanyRecord) -> str:
    return f"{company.industry} • {company.country}"


def founded_label(company: CompanyRecord) -> str:
    return f"Founded {company.founded}"


def employees_label(company: CompanyRecord) -> str:
    return f"{company.employees} employees"


def innovation_label(company: CompanyRecord) -> str:
    return f"Innovation: {company.innovation}"


def total_employees_label(total: int) -> str:
    """Render the employee estimate with thousands separators, e.g. ``1,085+``."""
    return f"{total:,}+"


def website_href(website: Optional[str]) -> Optional[str]:
    """Return a clickable URL, or ``None`` when the company lists no website."""
    text = (website or "").strip()
    if not text:
        return None
    if "://" in text:
        return text
    return f"https://{text}"


def affiliate_offer(company: CompanyRecord) -> Optional[str]:
    """Describe an affiliate discount; ``None`` hides the badge."""
    if not company.affiliate:
        return None
    if company.discount_text and company.discount_code:
        return f"{company.discount_text} with code {company.discount_code}"
    if company.discount_code:
        return f"Use code {company.discount_code}"
    return company.discount_text or "Partner"


def article_subtitle(article: ResearchArticleRecord) -> str:
    parts = [part for part in (article.journal, str(article.year) if article.year else "") if part]
    return " • ".join(parts)


def showing_label(shown: int, total: int, noun: str) -> str:
    return f"Showing {shown} of {total} {noun}"


__all__ = [
    "affiliate_offer",
    "article_subtitle",
    "company_subtitle",
    "count_label",
    "employees_label",
    "founded_label",
    "innovation_label",
    "showing_label",
    "total_employees_label",
    "website_href",
]
