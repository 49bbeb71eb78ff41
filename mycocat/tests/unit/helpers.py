from __future__ import annotations

from typing import Any

from mycocat.domain.entities import CompanyRecord, ResearchArticleRecord


def make_company(id: str, **overrides: Any) -> CompanyRecord:
    fields = {
        "name": f"Company {id}",
        "industry": "Biomaterials",
        "country": "USA",
        "founded": 2015,
        "employees": "10-50",
        "products": "",
        "description": "",
        "technologies": "",
        "business_model": "B2B",
        "target": "",
        "innovation": "Medium",
    }
    fields.update(overrides)
    return CompanyRecord(id=id, **fields)


def make_article(id: str, **overrides: Any) -> ResearchArticleRecord:
    fields = {
        "title": f"Article {id}",
        "authors": "Doe J.",
        "journal": "Fungal Biology",
        "year": 2020,
        "category": "Biomaterials",
    }
    fields.update(overrides)
    return ResearchArticleRecord(id=id, **fields)


__all__ = ["make_article", "make_company"]
