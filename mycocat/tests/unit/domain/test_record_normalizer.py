from __future__ import annotations

import pytest

from mycocat.domain.record_normalizer import (
    affiliate_match_keys,
    apply_affiliate,
    has_company_fields,
    normalize_article,
    normalize_company,
    normalize_report,
)


def _company_row(**overrides):
    row = {
        "id": 7,
        "name": "Biohm",
        "industry": "Construction",
        "country": "UK",
        "founded": "2016",
        "employees": "10-50",
        "products": "Mycelium insulation",
        "businessModel": "B2B",
        "target": "Builders",
        "innovation": "high",
        "website": "  ",
    }
    row.update(overrides)
    return row


def test_normalize_company_maps_camel_case_and_coerces() -> None:
    company = normalize_company(_company_row())
    assert company.id == "7"
    assert company.founded == 2016
    assert company.business_model == "B2B"
    assert company.innovation == "High"
    assert company.website is None
    assert company.affiliate is False


@pytest.mark.parametrize(
    "overrides",
    [
        {"industry": ""},
        {"innovation": "Extreme"},
        {"founded": "unknown"},
        {"id": None},
    ],
)
def test_normalize_company_rejects_invalid_rows(overrides) -> None:
    with pytest.raises(ValueError):
        normalize_company(_company_row(**overrides))


def test_apply_affiliate_overlays_fields() -> None:
    company = normalize_company(_company_row(website="biohm.co.uk"))
    merged = apply_affiliate(company, {"affiliateUrl": "biohm.co.uk/?ref=x", "discountCode": "MYCO"})
    assert merged.affiliate is True
    assert merged.affiliate_url == "biohm.co.uk/?ref=x"
    assert merged.discount_code == "MYCO"
    assert merged.website == "biohm.co.uk"
    assert company.affiliate is False


def test_has_company_fields() -> None:
    assert has_company_fields(_company_row())
    assert not has_company_fields({"id": 3, "affiliateUrl": "x"})


def test_sentinel_article_row_is_lenient() -> None:
    article = normalize_article(
        {"title": "Title", "year": "Year", "category": "Category", "keywords": "Keywords"},
        index=0,
    )
    assert article.id == "0"
    assert article.year is None
    assert article.keywords == ("Keywords",)


def test_article_keywords_accept_list_or_comma_string() -> None:
    from_list = normalize_article({"id": "a", "title": "T", "keywords": [" fungi ", "", "spores"]}, index=1)
    from_text = normalize_article({"id": "b", "title": "T", "keywords": "fungi, spores"}, index=2)
    assert from_list.keywords == ("fungi", "spores")
    assert from_text.keywords == ("fungi", "spores")


def test_article_without_title_is_rejected() -> None:
    with pytest.raises(ValueError):
        normalize_article({"id": "x", "category": "Health"}, index=3)


def test_normalize_report() -> None:
    report = normalize_report({"title": "Overview", "highlights": ["Market size", ""], "url": "u"})
    assert report.highlights == ("Market size",)
    with pytest.raises(ValueError):
        normalize_report({"title": "Broken", "highlights": "not a list"})


@pytest.mark.parametrize("year", [float("nan"), float("inf"), "-Infinity", "NaN"])
def test_non_finite_article_year_becomes_none(year) -> None:
    article = normalize_article({"title": "Spores", "category": "Mycology", "year": year}, index=2)
    assert article.year is None

    sentinel = normalize_article({"category": "Category", "year": year}, index=0)
    assert sentinel.year is None


def test_affiliate_match_keys_treat_null_as_empty() -> None:
    assert affiliate_match_keys({"id": None, "name": None}) == ("", "")
    assert affiliate_match_keys({"id": 5, "name": " Four Sigmatic "}) == ("5", "four sigmatic")
