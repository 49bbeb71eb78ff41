from __future__ import annotations

import pytest

from mycocat.domain.article_view import (
    build_article_view,
    compute_article_category_counts,
    compute_article_stats,
    filter_articles,
    list_article_categories,
    sort_articles,
)
from mycocat.domain.entities import ArticleStats
from mycocat.domain.query import QueryState
from mycocat.tests.unit.helpers import make_article


@pytest.fixture
def dataset():
    return (
        make_article(
            "0",
            title="Title",
            authors="Authors",
            journal="Journal",
            year=None,
            category="Category",
            summary="Summary",
            keywords=("Keywords",),
        ),
        make_article(
            "1",
            title="Fungal mycelium as packaging",
            journal="Materials Today",
            year=2018,
            category="Biomaterials",
            keywords=("mycelium composites", "packaging"),
        ),
        make_article(
            "2",
            title="Mycoprotein and health",
            authors="Finnigan T.",
            journal="Current Developments in Nutrition",
            year=2019,
            category="Food & Nutrition",
            summary="Nutritional evidence for mycoprotein.",
        ),
        make_article(
            "3",
            title="Lion's mane neurotrophic properties",
            journal="Int. J. Medicinal Mushrooms",
            year=2013,
            category="Health",
            keywords=("Hericium erinaceus",),
        ),
        make_article(
            "4",
            title="Mycelium construction materials",
            journal="Materials & Design",
            year=2020,
            category="Biomaterials",
        ),
    )


def test_sentinel_rows_never_surface(dataset) -> None:
    for query in (
        QueryState(sort_key="year"),
        QueryState(search_term="", category="Category"),
        QueryState(search_term="title"),
        QueryState(search_term="keywords"),
    ):
        assert all(a.category != "Category" for a in filter_articles(dataset, query))
    assert filter_articles(dataset, QueryState(category="Category")) == ()
    assert "Category" not in compute_article_category_counts(dataset)
    assert "Category" not in list_article_categories(dataset)


def test_empty_search_returns_all_displayable(dataset) -> None:
    result = filter_articles(dataset, QueryState())
    assert {a.id for a in result} == {"1", "2", "3", "4"}


@pytest.mark.parametrize(
    "term, expected_ids",
    [
        ("PACKAGING", {"1"}),  # title and keyword
        ("finnigan", {"2"}),  # authors
        ("materials", {"1", "4"}),  # journal
        ("nutritional", {"2"}),  # summary
        ("erinaceus", {"3"}),  # keyword only
        ("composites", {"1"}),  # keyword substring
        ("nothing here", set()),
    ],
)
def test_search_fields_and_keywords(dataset, term, expected_ids) -> None:
    result = filter_articles(dataset, QueryState(search_term=term))
    assert {a.id for a in result} == expected_ids


def test_category_filter_exact_match(dataset) -> None:
    result = filter_articles(dataset, QueryState(category="Biomaterials"))
    assert {a.id for a in result} == {"1", "4"}
    assert filter_articles(dataset, QueryState(category="biomaterials")) == ()


def test_sort_by_year_descending_with_undated_last() -> None:
    articles = [
        make_article("a", year=2013),
        make_article("b", year=None),
        make_article("c", year=2020),
        make_article("d", year=2018),
    ]
    assert [a.id for a in sort_articles(articles, "year")] == ["c", "d", "a", "b"]


@pytest.mark.parametrize(
    "sort_key, expected",
    [
        ("title", ["1", "3", "4", "2"]),
        ("category", ["1", "4", "2", "3"]),
        ("journal", ["2", "3", "4", "1"]),
    ],
)
def test_alphabetical_sorts(dataset, sort_key, expected) -> None:
    visible = filter_articles(dataset, QueryState())
    assert [a.id for a in sort_articles(visible, sort_key)] == expected


def test_unknown_sort_key_keeps_order(dataset) -> None:
    assert sort_articles(dataset, "citations") == tuple(dataset)


def test_stats_and_counts_exclude_sentinel(dataset) -> None:
    assert compute_article_stats(dataset) == ArticleStats(
        article_count=4, category_count=3, journal_count=4
    )
    assert compute_article_category_counts(dataset) == {
        "Biomaterials": 2,
        "Food & Nutrition": 1,
        "Health": 1,
    }


def test_build_view_defaults_to_year_order(dataset) -> None:
    view = build_article_view(dataset, QueryState(sort_key="year"))
    assert [a.id for a in view.articles] == ["4", "2", "1", "3"]
    assert view.total == 4
    assert view.categories == ("Biomaterials", "Food & Nutrition", "Health")


def test_empty_dataset() -> None:
    view = build_article_view((), QueryState(search_term="x"))
    assert view.articles == ()
    assert view.stats == ArticleStats()
    assert view.category_counts == {}
    assert view.total == 0


def test_pipeline_is_idempotent(dataset) -> None:
    query = QueryState(search_term="myc", sort_key="title")
    assert build_article_view(dataset, query) == build_article_view(dataset, query)
