"""Pure filter, sort and aggregate functions for the company browser.

Every function takes the dataset as a read-only sequence and returns a fresh
value; nothing here mutates its inputs or keeps state between calls.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from .entities import CompanyRecord, CompanyStats, CompanyView
from .query import ALL_CATEGORIES, QueryState
from .util import any_contains, locale_key, unique_in_order

INNOVATION_RANK: Dict[str, int] = {"High": 3, "Medium": 2, "Low": 1}

# Order matters: buckets are matched by substring and the first hit wins.
EMPLOYEE_ESTIMATES: Tuple[Tuple[str, int], ...] = (
    ("500+", 750),
    ("100-500", 300),
    ("50-100", 75),
    ("10-50", 30),
)
DEFAULT_EMPLOYEE_ESTIMATE = 5


def _search_fields(company: CompanyRecord) -> Tuple[str, ...]:
    return (
        company.name,
        company.products,
        company.description,
        company.industry,
        company.country,
        company.technologies,
        company.business_model,
        company.target,
    )


def matches_company(company: CompanyRecord, query: QueryState) -> bool:
    """Return whether one company passes both the search and industry filter."""
    term = query.search_term.casefold()
    matches_search = term == "" or any_contains(_search_fields(company), term)
    matches_industry = query.category == ALL_CATEGORIES or company.industry == query.category
    return matches_search and matches_industry


def filter_companies(
    dataset: Sequence[CompanyRecord], query: QueryState
) -> Tuple[CompanyRecord, ...]:
    return tuple(company for company in dataset if matches_company(company, query))


def sort_companies(
    companies: Sequence[CompanyRecord], sort_key: str
) -> Tuple[CompanyRecord, ...]:
    """Return ``companies`` ordered by ``sort_key``.

    ``name`` sorts ascending, ``founded`` newest first and ``innovation`` from
    High to Low. Ties keep their input order. Unknown keys leave the order
    untouched.
    """
    if sort_key == "name":
        return tuple(sorted(companies, key=lambda c: locale_key(c.name)))
    if sort_key == "founded":
        return tuple(sorted(companies, key=lambda c: -c.founded))
    if sort_key == "innovation":
        return tuple(sorted(companies, key=lambda c: -INNOVATION_RANK.get(c.innovation, 0)))
    return tuple(companies)


def employee_estimate(bucket: str) -> int:
    """Map an employee-count bucket string to a headcount estimate."""
    text = bucket or ""
    for needle, estimate in EMPLOYEE_ESTIMATES:
        if needle in text:
            return estimate
    return DEFAULT_EMPLOYEE_ESTIMATE


def compute_stats(dataset: Sequence[CompanyRecord]) -> CompanyStats:
    return CompanyStats(
        company_count=len(dataset),
        industry_count=len({company.industry for company in dataset}),
        country_count=len({company.country for company in dataset}),
        total_employee_estimate=sum(employee_estimate(c.employees) for c in dataset),
    )


def compute_category_counts(dataset: Sequence[CompanyRecord]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for company in dataset:
        counts[company.industry] = counts.get(company.industry, 0) + 1
    return counts


def list_industries(dataset: Sequence[CompanyRecord]) -> Tuple[str, ...]:
    return unique_in_order(company.industry for company in dataset)


def build_company_view(dataset: Sequence[CompanyRecord], query: QueryState) -> CompanyView:
    """Run filter then sort and attach dataset-wide stats and counts."""
    filtered = filter_companies(dataset, query)
    return CompanyView(
        companies=sort_companies(filtered, query.sort_key),
        stats=compute_stats(dataset),
        category_counts=compute_category_counts(dataset),
        categories=list_industries(dataset),
        total=len(dataset),
    )


__all__ = [
    "DEFAULT_EMPLOYEE_ESTIMATE",
    "EMPLOYEE_ESTIMATES",
    "INNOVATION_RANK",
    "build_company_view",
    "compute_category_counts",
    "compute_stats",
    "employee_estimate",
    "filter_companies",
    "list_industries",
    "matches_company",
    "sort_companies",
]
