from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from ..domain.company_view import build_company_view
from ..domain.entities import CompanyRecord, CompanyView
from ..domain.query import DEFAULT_COMPANY_SORT, QueryState
from .browser_vm import BrowserVM
from .catalog_format import total_employees_label


class CompanyBrowserVM(BrowserVM[CompanyRecord, CompanyView]):
    """Company list state: search box, industry filter, sort selector, stats."""

    all_label = "All Industries"
    noun = "companies"
    sort_options = (
        ("name", "Name A-Z"),
        ("founded", "Newest First"),
        ("innovation", "Innovation Level"),
    )

    def __init__(
        self,
        companies: Sequence[CompanyRecord] = (),
        *,
        sort_key: str = DEFAULT_COMPANY_SORT,
        on_view_changed: Optional[Callable[[CompanyView], None]] = None,
    ) -> None:
        super().__init__(companies, sort_key=sort_key, on_view_changed=on_view_changed)

    def _build_view(self, records: Sequence[CompanyRecord], query: QueryState) -> CompanyView:
        return build_company_view(records, query)

    def _shown(self) -> Sequence[CompanyRecord]:
        return self.view.companies

    @property
    def companies(self) -> Tuple[CompanyRecord, ...]:
        return self.view.companies

    def stat_tiles(self) -> Tuple[Tuple[str, str], ...]:
        """``(value, caption)`` pairs for the four stats cards."""
        stats = self.view.stats
        return (
            (str(stats.company_count), "Companies"),
            (str(stats.industry_count), "Industries Tracked"),
            (str(stats.country_count), "Countries Represented"),
            (total_employees_label(stats.total_employee_estimate), "Total Employees"),
        )


__all__ = ["CompanyBrowserVM"]
