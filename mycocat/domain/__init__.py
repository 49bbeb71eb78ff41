"""Domain package exports for catalog records, query state and the view engine."""

from .article_view import build_article_view, filter_articles, sort_articles
from .company_view import (
    build_company_view,
    compute_category_counts,
    compute_stats,
    filter_companies,
    sort_companies,
)
from .entities import (
    ArticleStats,
    ArticleView,
    Catalog,
    CompanyRecord,
    CompanyStats,
    CompanyView,
    IndustryReport,
    ResearchArticleRecord,
)
from .query import ALL_CATEGORIES, SENTINEL_CATEGORY, QueryState

__all__ = [
    "ALL_CATEGORIES",
    "ArticleStats",
    "ArticleView",
    "Catalog",
    "CompanyRecord",
    "CompanyStats",
    "CompanyView",
    "IndustryReport",
    "QueryState",
    "ResearchArticleRecord",
    "SENTINEL_CATEGORY",
    "build_article_view",
    "build_company_view",
    "compute_category_counts",
    "compute_stats",
    "filter_articles",
    "filter_companies",
    "sort_articles",
    "sort_companies",
]
