from __future__ import annotations

import dataclasses

import pytest

from mycocat.domain.query import QueryState
from mycocat.tests.unit.helpers import make_company


def test_company_record_is_immutable() -> None:
    company = make_company("1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        company.name = "Other"  # type: ignore[misc]


def test_company_record_rejects_unknown_innovation() -> None:
    with pytest.raises(ValueError):
        make_company("1", innovation="Extreme")


def test_company_record_requires_integer_year() -> None:
    with pytest.raises(TypeError):
        make_company("1", founded="2016")


def test_query_state_updates_return_new_values() -> None:
    query = QueryState(sort_key="founded")
    searched = query.with_search_term("myco").with_category("Biomaterials")
    assert query == QueryState(sort_key="founded")
    assert searched == QueryState(search_term="myco", category="Biomaterials", sort_key="founded")
    assert searched.cleared() == QueryState(sort_key="founded")


def test_query_state_empty_category_means_all() -> None:
    assert QueryState().with_category("").category == "all"
