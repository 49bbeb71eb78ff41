"""Query parameters driving the company and research browsers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

ALL_CATEGORIES = "all"
SENTINEL_CATEGORY = "Category"

COMPANY_SORT_KEYS: Tuple[str, ...] = ("name", "founded", "innovation")
ARTICLE_SORT_KEYS: Tuple[str, ...] = ("year", "title", "category", "journal")

DEFAULT_COMPANY_SORT = "name"
DEFAULT_ARTICLE_SORT = "year"


@dataclass(frozen=True)
class QueryState:
    """Search term, category filter and sort key for one browser.

    Instances are immutable; the ``with_*`` helpers return updated copies so a
    view model can swap its state atomically.
    """

    search_term: str = ""
    category: str = ALL_CATEGORIES
    sort_key: str = DEFAULT_COMPANY_SORT

    def with_search_term(self, term: str) -> "QueryState":
        return replace(self, search_term=term or "")

    def with_category(self, category: str) -> "QueryState":
        return replace(self, category=category or ALL_CATEGORIES)

    def with_sort_key(self, sort_key: str) -> "QueryState":
        return replace(self, sort_key=sort_key or "")

    def cleared(self) -> "QueryState":
        """Reset search and category while keeping the sort order."""
        return replace(self, search_term="", category=ALL_CATEGORIES)


__all__ = [
    "ALL_CATEGORIES",
    "ARTICLE_SORT_KEYS",
    "COMPANY_SORT_KEYS",
    "DEFAULT_ARTICLE_SORT",
    "DEFAULT_COMPANY_SORT",
    "SENTINEL_CATEGORY",
    "QueryState",
]
