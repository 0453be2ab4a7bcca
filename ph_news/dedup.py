from __future__ import annotations

from typing import Iterable, List, Set

from .models import Article


def is_complete(article: Article) -> bool:
    return bool(article.title) and bool(article.url)


def deduplicate(items: Iterable[Article]) -> List[Article]:
    """
    Drop incomplete articles (empty title or url), then duplicates by
    lowercased title. Keeps the first occurrence and preserves original order.
    """
    seen: Set[str] = set()
    out: List[Article] = []

    for it in items:
        if not is_complete(it):
            continue
        key = it.title.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(it)
    return out
