"""Pure filter, sort and aggregate functions for the research article browser.

Rows whose category is the ``"Category"`` placeholder are dropped before any
other step, so they never reach results, counts or the category list.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from .entities import ArticleStats, ArticleView, ResearchArticleRecord
from .query import ALL_CATEGORIES, SENTINEL_CATEGORY, QueryState
from .util import any_contains, contains_term, locale_key, unique_in_order


def is_displayable(article: ResearchArticleRecord) -> bool:
    return article.category != SENTINEL_CATEGORY


def displayable_articles(
    dataset: Sequence[ResearchArticleRecord],
) -> Tuple[ResearchArticleRecord, ...]:
    return tuple(article for article in dataset if is_displayable(article))


def matches_article(article: ResearchArticleRecord, query: QueryState) -> bool:
    if not is_displayable(article):
        return False
    term = query.search_term.casefold()
    matches_search = (
        term == ""
        or any_contains((article.title, article.authors, article.journal, article.summary), term)
        or any(contains_term(keyword, term) for keyword in article.keywords)
    )
    matches_category = query.category == ALL_CATEGORIES or article.category == query.category
    return matches_search and matches_category


def filter_articles(
    dataset: Sequence[ResearchArticleRecord], query: QueryState
) -> Tuple[ResearchArticleRecord, ...]:
    return tuple(article for article in dataset if matches_article(article, query))


def _year_key(article: ResearchArticleRecord) -> Tuple[int, int]:
    # undated articles go last
    if article.year is None:
        return (1, 0)
    return (0, -article.year)


def sort_articles(
    articles: Sequence[ResearchArticleRecord], sort_key: str
) -> Tuple[ResearchArticleRecord, ...]:
    """Return ``articles`` ordered by ``sort_key``; unknown keys keep input order."""
    if sort_key == "year":
        return tuple(sorted(articles, key=_year_key))
    if sort_key == "title":
        return tuple(sorted(articles, key=lambda a: locale_key(a.title)))
    if sort_key == "category":
        return tuple(sorted(articles, key=lambda a: locale_key(a.category)))
    if sort_key == "journal":
        return tuple(sorted(articles, key=lambda a: locale_key(a.journal)))
    return tuple(articles)


def compute_article_category_counts(dataset: Sequence[ResearchArticleRecord]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for article in displayable_articles(dataset):
        counts[article.category] = counts.get(article.category, 0) + 1
    return counts


def list_article_categories(dataset: Sequence[ResearchArticleRecord]) -> Tuple[str, ...]:
    return unique_in_order(article.category for article in displayable_articles(dataset))


def compute_article_stats(dataset: Sequence[ResearchArticleRecord]) -> ArticleStats:
    visible = displayable_articles(dataset)
    return ArticleStats(
        article_count=len(visible),
        category_count=len({article.category for article in visible}),
        journal_count=len({article.journal for article in visible if article.journal}),
    )


def build_article_view(
    dataset: Sequence[ResearchArticleRecord], query: QueryState
) -> ArticleView:
    filtered = filter_articles(dataset, query)
    stats = compute_article_stats(dataset)
    return ArticleView(
        articles=sort_articles(filtered, query.sort_key),
        stats=stats,
        category_counts=compute_article_category_counts(dataset),
        categories=list_article_categories(dataset),
        total=stats.article_count,
    )


__all__ = [
    "build_article_view",
    "compute_article_category_counts",
    "compute_article_stats",
    "displayable_articles",
    "filter_articles",
    "is_displayable",
    "list_article_categories",
    "matches_article",
    "sort_articles",
]
