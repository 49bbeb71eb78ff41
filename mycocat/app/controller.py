"""Root controller owning page navigation and the browser view models.

Call context:
    ``mycocat.web_ui.runtime.WebRuntime`` builds one controller from the loaded
    :class:`~mycocat.domain.entities.Catalog` and hands it to the NiceGUI
    pages. Pages read state from the controller and call its commands; the
    controller never reaches back into widgets.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Tuple

from ..domain.entities import Catalog, IndustryReport
from ..domain.query import DEFAULT_ARTICLE_SORT, DEFAULT_COMPANY_SORT
from ..viewmodels.company_browser_vm import CompanyBrowserVM
from ..viewmodels.research_browser_vm import ResearchBrowserVM


class Page(str, Enum):
    HOME = "home"
    RESEARCH = "research"
    REPORTS = "reports"


NAV_ITEMS: Tuple[Tuple[Page, str], ...] = (
    (Page.HOME, "Companies"),
    (Page.RESEARCH, "Research"),
    (Page.REPORTS, "Industry Reports"),
)


class CatalogController:
    """Hold the current page plus one query-owning view model per dataset."""

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        *,
        company_sort: str = DEFAULT_COMPANY_SORT,
        article_sort: str = DEFAULT_ARTICLE_SORT,
        on_page_changed: Optional[Callable[[Page], None]] = None,
    ) -> None:
        """Create browser view models over ``catalog``.

        Args:
            catalog: Loaded datasets; an empty catalog is used when omitted.
            company_sort: Initial sort key for the company browser.
            article_sort: Initial sort key for the research browser.
            on_page_changed: Called with the new page after navigation.
        """
        self._log = logging.getLogger(__name__)
        self.catalog = catalog or Catalog()
        self.on_page_changed = on_page_changed
        self.current_page = Page.HOME
        self.companies = CompanyBrowserVM(self.catalog.companies, sort_key=company_sort)
        self.research = ResearchBrowserVM(self.catalog.articles, sort_key=article_sort)

    @property
    def reports(self) -> Tuple[IndustryReport, ...]:
        return self.catalog.reports

    @property
    def show_back_button(self) -> bool:
        return self.current_page is not Page.HOME

    def navigate(self, page: str) -> Page:
        """Switch to ``page``; unknown names fall back to the home page."""
        try:
            target = Page(page)
        except ValueError:
            self._log.warning("Unknown page %r, showing home", page)
            target = Page.HOME
        self.current_page = target
        if self.on_page_changed:
            self.on_page_changed(target)
        return target

    def go_home(self) -> Page:
        return self.navigate(Page.HOME.value)

    def replace_catalog(self, catalog: Catalog) -> None:
        """Swap in a freshly loaded catalog, keeping each browser's query."""
        self.catalog = catalog
        self.companies.set_dataset(catalog.companies)
        self.research.set_dataset(catalog.articles)


__all__ = ["CatalogController", "NAV_ITEMS", "Page"]
