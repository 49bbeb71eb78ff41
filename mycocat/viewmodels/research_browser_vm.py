from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from ..domain.article_view import build_article_view
from ..domain.entities import ArticleView, ResearchArticleRecord
from ..domain.query import DEFAULT_ARTICLE_SORT, QueryState
from .browser_vm import BrowserVM


class ResearchBrowserVM(BrowserVM[ResearchArticleRecord, ArticleView]):
    """Research article list state; placeholder rows never surface here."""

    all_label = "All Categories"
    noun = "articles"
    sort_options = (
        ("year", "Newest First"),
        ("title", "Title A-Z"),
        ("category", "Category"),
        ("journal", "Journal"),
    )

    def __init__(
        self,
        articles: Sequence[ResearchArticleRecord] = (),
        *,
        sort_key: str = DEFAULT_ARTICLE_SORT,
        on_view_changed: Optional[Callable[[ArticleView], None]] = None,
    ) -> None:
        super().__init__(articles, sort_key=sort_key, on_view_changed=on_view_changed)

    def _build_view(self, records: Sequence[ResearchArticleRecord], query: QueryState) -> ArticleView:
        return build_article_view(records, query)

    def _shown(self) -> Sequence[ResearchArticleRecord]:
        return self.view.articles

    @property
    def articles(self) -> Tuple[ResearchArticleRecord, ...]:
        return self.view.articles


__all__ = ["ResearchBrowserVM"]
