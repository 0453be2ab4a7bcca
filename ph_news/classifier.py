from __future__ import annotations

from typing import Iterable, Tuple

from .sources import DEFAULT_CATEGORY


# Checked in order; first match wins
_CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Business", ("business",)),
    ("Sports", ("sports",)),
    ("World", ("world",)),
    ("Tech", ("tech", "science")),
    ("Nation", ("metro", "nation", "philippines")),
)


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = text.lower()
    return any(k.lower() in t for k in keywords)


def to_category(source_label: str = "", feed_title: str = "") -> str:
    """
    Heuristic category for every item of a feed, from its source label and
    channel title. Substring matching; false positives are accepted.
    """
    haystack = f"{source_label or ''} {feed_title or ''}"
    for category, keywords in _CATEGORY_KEYWORDS:
        if _contains_any(haystack, keywords):
            return category
    return DEFAULT_CATEGORY
