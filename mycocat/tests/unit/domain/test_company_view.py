from __future__ import annotations

import pytest

from mycocat.domain.company_view import (
    build_company_view,
    compute_category_counts,
    compute_stats,
    employee_estimate,
    filter_companies,
    list_industries,
    sort_companies,
)
from mycocat.domain.entities import CompanyStats
from mycocat.domain.query import QueryState
from mycocat.tests.unit.helpers import make_company


@pytest.fixture
def dataset():
    return (
        make_company(
            "1",
            name="Ecovative",
            industry="Biomaterials",
            country="USA",
            founded=2007,
            employees="100-500",
            products="Mycelium packaging",
            technologies="Aerial mycelium",
            innovation="High",
        ),
        make_company(
            "2",
            name="Quorn",
            industry="Food & Beverage",
            country="UK",
            founded=1985,
            employees="500+",
            description="Mycoprotein foods",
            business_model="B2C",
            target="Retail consumers",
            innovation="Medium",
        ),
        make_company(
            "3",
            name="Four Sigmatic",
            industry="Health & Wellness",
            country="Finland",
            founded=2012,
            employees="50-100",
            products="Mushroom coffee",
            innovation="Low",
        ),
        make_company(
            "4",
            name="MycoWorks",
            industry="Biomaterials",
            country="USA",
            founded=2013,
            employees="100-500",
            products="Fine mycelium leather",
            innovation="High",
        ),
    )


def test_empty_search_and_all_returns_everything(dataset) -> None:
    result = filter_companies(dataset, QueryState(search_term="", category="all"))
    assert set(result) == set(dataset)


@pytest.mark.parametrize(
    "term, expected_ids",
    [
        ("ecovat", {"1"}),  # name
        ("PACKAGING", {"1"}),  # products, case-insensitive
        ("mycoprotein", {"2"}),  # description
        ("wellness", {"3"}),  # industry
        ("finland", {"3"}),  # country
        ("aerial", {"1"}),  # technologies
        ("b2c", {"2"}),  # business model
        ("retail", {"2"}),  # target
        ("mycelium", {"1", "4"}),
        ("no such thing", set()),
    ],
)
def test_search_matches_any_listed_field(dataset, term, expected_ids) -> None:
    result = filter_companies(dataset, QueryState(search_term=term))
    assert {company.id for company in result} == expected_ids


def test_every_substring_of_a_matched_field_includes_the_record(dataset) -> None:
    company = dataset[1]
    for field_value in (company.name, company.description, company.country, company.target):
        for start in range(len(field_value)):
            term = field_value[start : start + 3]
            assert filter_companies([company], QueryState(search_term=term)) == (company,)


def test_industry_filter_is_anded_with_search(dataset) -> None:
    query = QueryState(search_term="mycelium", category="Biomaterials")
    assert {c.id for c in filter_companies(dataset, query)} == {"1", "4"}

    query = QueryState(search_term="coffee", category="Biomaterials")
    assert filter_companies(dataset, query) == ()


def test_unknown_industry_filter_yields_nothing(dataset) -> None:
    assert filter_companies(dataset, QueryState(category="Space Mining")) == ()


def test_filter_does_not_mutate_input(dataset) -> None:
    as_list = list(dataset)
    filter_companies(as_list, QueryState(search_term="myco"))
    assert as_list == list(dataset)


def test_sort_by_name_is_ascending(dataset) -> None:
    names = [c.name for c in sort_companies(dataset, "name")]
    assert names == ["Ecovative", "Four Sigmatic", "MycoWorks", "Quorn"]


def test_sort_by_name_ignores_case_and_accents() -> None:
    companies = [
        make_company("1", name="zeta"),
        make_company("2", name="Émile"),
        make_company("3", name="alpha"),
    ]
    assert [c.id for c in sort_companies(companies, "name")] == ["3", "2", "1"]


def test_sort_by_founded_is_total_descending(dataset) -> None:
    ordered = sort_companies(dataset, "founded")
    years = [c.founded for c in ordered]
    assert years == sorted(years, reverse=True)
    for earlier, later in zip(ordered, ordered[1:]):
        assert earlier.founded >= later.founded


def test_sort_by_innovation_groups_and_keeps_input_order() -> None:
    companies = [
        make_company("a", innovation="Low"),
        make_company("b", innovation="High"),
        make_company("c", innovation="Medium"),
        make_company("d", innovation="High"),
        make_company("e", innovation="Low"),
        make_company("f", innovation="Medium"),
    ]
    ordered = [c.id for c in sort_companies(companies, "innovation")]
    assert ordered == ["b", "d", "c", "f", "a", "e"]


def test_unknown_sort_key_keeps_order(dataset) -> None:
    assert sort_companies(dataset, "popularity") == tuple(dataset)
    assert sort_companies(dataset, "") == tuple(dataset)


@pytest.mark.parametrize(
    "bucket, estimate",
    [
        ("500+ employees", 750),
        ("100-500", 300),
        ("50-100", 75),
        ("10-50 range", 30),
        ("1-10", 5),
        ("unknown", 5),
        ("", 5),
    ],
)
def test_employee_estimate_mapping(bucket, estimate) -> None:
    assert employee_estimate(bucket) == estimate


def test_employee_estimate_first_match_wins() -> None:
    # "100-500+" contains both "500+" and "100-500"; the earlier rule wins.
    assert employee_estimate("100-500+") == 750


def test_compute_stats_sums_bucket_estimates() -> None:
    companies = [
        make_company("1", employees="500+ employees"),
        make_company("2", employees="100-500"),
        make_company("3", employees="unknown"),
        make_company("4", employees="10-50 range"),
    ]
    assert compute_stats(companies).total_employee_estimate == 1085


def test_compute_stats_counts_distinct_values(dataset) -> None:
    assert compute_stats(dataset) == CompanyStats(
        company_count=4,
        industry_count=3,
        country_count=3,
        total_employee_estimate=300 + 750 + 75 + 300,
    )


def test_category_counts_in_first_seen_order(dataset) -> None:
    counts = compute_category_counts(dataset)
    assert counts == {"Biomaterials": 2, "Food & Beverage": 1, "Health & Wellness": 1}
    assert list(counts) == ["Biomaterials", "Food & Beverage", "Health & Wellness"]
    assert list_industries(dataset) == ("Biomaterials", "Food & Beverage", "Health & Wellness")


def test_empty_dataset_produces_empty_view() -> None:
    view = build_company_view((), QueryState(search_term="x", category="Biomaterials"))
    assert view.companies == ()
    assert view.stats == CompanyStats(0, 0, 0, 0)
    assert view.category_counts == {}
    assert view.categories == ()
    assert view.total == 0


def test_pipeline_is_idempotent(dataset) -> None:
    query = QueryState(search_term="my", category="all", sort_key="innovation")
    first = build_company_view(dataset, query)
    second = build_company_view(dataset, query)
    assert first == second
    assert first.category_counts is not second.category_counts


def test_view_stats_cover_whole_dataset_not_filtered_subset(dataset) -> None:
    view = build_company_view(dataset, QueryState(category="Health & Wellness"))
    assert [c.id for c in view.companies] == ["3"]
    assert view.stats.company_count == 4
    assert view.total == 4
