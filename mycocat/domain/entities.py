from __future__ import annotations

"""Domain records and derived view values shared across adapters, use-cases, and view models."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

INNOVATION_LEVELS: Tuple[str, ...] = ("Low", "Medium", "High")


@dataclass(frozen=True)
class CompanyRecord:
    """One company entry of the static catalog."""

    id: str
    """Stable identifier, unique across the company dataset."""
    name: str
    industry: str
    country: str
    founded: int
    employees: str
    """Employee-count bucket such as ``"10-50"`` or ``"500+"``."""
    products: str = ""
    description: str = ""
    technologies: str = ""
    business_model: str = ""
    target: str = ""
    innovation: str = "Medium"
    stage: str = ""
    website: Optional[str] = None
    affiliate: bool = False
    affiliate_url: Optional[str] = None
    discount_code: Optional[str] = None
    discount_text: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("CompanyRecord.id must be a non-empty string.")
        if not isinstance(self.industry, str) or not self.industry.strip():
            raise ValueError(f"Company '{self.id}' has an empty industry.")
        if self.innovation not in INNOVATION_LEVELS:
            raise ValueError(
                f"Company '{self.id}' has unsupported innovation level '{self.innovation}'."
            )
        if isinstance(self.founded, bool) or not isinstance(self.founded, int):
            raise TypeError(f"Company '{self.id}' founded year must be an integer.")


@dataclass(frozen=True)
class ResearchArticleRecord:
    """One research article entry; sentinel rows are allowed but never displayed."""

    id: str
    title: str
    authors: str = ""
    journal: str = ""
    year: Optional[int] = None
    """Publication year, ``None`` when the source row carried no numeric year."""
    category: str = ""
    subcategory: str = ""
    type: str = ""
    summary: str = ""
    keywords: Tuple[str, ...] = ()
    url: str = ""


@dataclass(frozen=True)
class IndustryReport:
    """Downloadable industry report listed on the reports page."""

    title: str
    description: str = ""
    highlights: Tuple[str, ...] = ()
    url: str = ""


@dataclass(frozen=True)
class CompanyStats:
    """Aggregate numbers shown in the stats section."""

    company_count: int = 0
    industry_count: int = 0
    country_count: int = 0
    total_employee_estimate: int = 0


@dataclass(frozen=True)
class ArticleStats:
    """Aggregate numbers over displayable research articles."""

    article_count: int = 0
    category_count: int = 0
    journal_count: int = 0


@dataclass(frozen=True)
class CompanyView:
    """Derived, display-ready state for the company browser."""

    companies: Tuple[CompanyRecord, ...] = ()
    stats: CompanyStats = field(default_factory=CompanyStats)
    category_counts: Dict[str, int] = field(default_factory=dict)
    categories: Tuple[str, ...] = ()
    total: int = 0


@dataclass(frozen=True)
class ArticleView:
    """Derived, display-ready state for the research browser."""

    articles: Tuple[ResearchArticleRecord, ...] = ()
    stats: ArticleStats = field(default_factory=ArticleStats)
    category_counts: Dict[str, int] = field(default_factory=dict)
    categories: Tuple[str, ...] = ()
    total: int = 0


@dataclass(frozen=True)
class Catalog:
    """Immutable bundle of every dataset loaded at startup."""

    companies: Tuple[CompanyRecord, ...] = ()
    articles: Tuple[ResearchArticleRecord, ...] = ()
    reports: Tuple[IndustryReport, ...] = ()


__all__ = [
    "INNOVATION_LEVELS",
    "ArticleStats",
    "ArticleView",
    "Catalog",
    "CompanyRecord",
    "CompanyStats",
    "CompanyView",
    "IndustryReport",
    "ResearchArticleRecord",
]
