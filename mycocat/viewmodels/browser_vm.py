"""Shared query/recompute plumbing for the company and research browsers.

Call context:
    ``CatalogController`` owns one instance of each concrete subclass. Views
    call the ``set_*`` commands; every command swaps in a new ``QueryState``,
    recomputes the derived view from scratch and notifies ``on_view_changed``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

from ..domain.query import ALL_CATEGORIES, QueryState
from .catalog_format import count_label, showing_label
from .select_vm import SelectVM

RecordT = TypeVar("RecordT")
ViewT = TypeVar("ViewT")


class BrowserVM(Generic[RecordT, ViewT]):
    """Base view model holding a read-only dataset and the current query."""

    all_label = "All"
    noun = "records"
    sort_options: Tuple[Tuple[str, str], ...] = ()

    def __init__(
        self,
        records: Sequence[RecordT] = (),
        *,
        sort_key: str,
        on_view_changed: Optional[Callable[[ViewT], None]] = None,
    ) -> None:
        self._log = logging.getLogger(self.__class__.__module__)
        self._records: Tuple[RecordT, ...] = tuple(records)
        self.on_view_changed = on_view_changed
        self.query = QueryState(sort_key=sort_key)
        self.filter_select = SelectVM(value=ALL_CATEGORIES, on_value_change=self.set_category_filter)
        self.sort_select = SelectVM(value=sort_key, on_value_change=self.set_sort_key)
        self.sort_select.set_options(self.sort_options)
        self.view: ViewT = self._build_view(self._records, self.query)
        self._refresh_filter_options()

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------
    def _build_view(self, records: Sequence[RecordT], query: QueryState) -> ViewT:
        raise NotImplementedError

    def _shown(self) -> Sequence[Any]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Commands (called by View)
    # ------------------------------------------------------------------
    @property
    def records(self) -> Tuple[RecordT, ...]:
        return self._records

    def set_dataset(self, records: Sequence[RecordT]) -> None:
        self._records = tuple(records)
        self._recompute()

    def set_search_term(self, term: str) -> None:
        self._apply(self.query.with_search_term(term))

    def set_category_filter(self, category: str) -> None:
        self._apply(self.query.with_category(category))

    def set_sort_key(self, sort_key: str) -> None:
        self._apply(self.query.with_sort_key(sort_key))

    def clear_filters(self) -> None:
        """Reset search and category filter; the sort order stays."""
        self._apply(self.query.cleared())

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------
    def filter_options(self) -> List[Tuple[str, str]]:
        view: Any = self.view
        options = [(ALL_CATEGORIES, count_label(self.all_label, view.total))]
        options.extend(
            (category, count_label(category, view.category_counts.get(category, 0)))
            for category in view.categories
        )
        return options

    def summary_label(self) -> str:
        view: Any = self.view
        return showing_label(len(self._shown()), view.total, self.noun)

    @property
    def is_empty(self) -> bool:
        return not self._shown()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _apply(self, query: QueryState) -> None:
        self.query = query
        self._recompute()

    def _recompute(self) -> None:
        self.view = self._build_view(self._records, self.query)
        self.filter_select.value = self.query.category
        self.sort_select.value = self.query.sort_key
        self._refresh_filter_options()
        self._log.debug(
            "Recomputed view: term=%r category=%r sort=%r -> %d shown",
            self.query.search_term,
            self.query.category,
            self.query.sort_key,
            len(self._shown()),
        )
        if self.on_view_changed:
            self.on_view_changed(self.view)

    def _refresh_filter_options(self) -> None:
        self.filter_select.set_options(self.filter_options())


__all__ = ["BrowserVM"]
