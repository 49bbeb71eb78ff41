from __future__ import annotations

import unicodedata
from typing import Iterable, Optional, Tuple


def contains_term(haystack: Optional[str], needle: str) -> bool:
    """Return True when ``needle`` occurs in ``haystack`` ignoring case.

    ``needle`` must already be case-folded by the caller.
    """
    if not haystack:
        return False
    return needle in haystack.casefold()


def any_contains(fields: Iterable[Optional[str]], needle: str) -> bool:
    return any(contains_term(value, needle) for value in fields)


def locale_key(text: Optional[str]) -> Tuple[str, str]:
    """
    Collation key approximating locale-aware string comparison.

    Accents and case are ignored on the primary level; the raw text breaks
    ties so ordering stays deterministic.
    """
    raw = text or ""
    decomposed = unicodedata.normalize("NFKD", raw)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), raw


def unique_in_order(values: Iterable[str]) -> Tuple[str, ...]:
    seen = {}
    for value in values:
        seen.setdefault(value, None)
    return tuple(seen)


__all__ = ["any_contains", "contains_term", "locale_key", "unique_in_order"]
