from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from .images import FallbackCounter, resolve_image
from .models import Article, Source
from .parser import parse_entry
from .sources import DEFAULT_AUTHOR


def to_article(
    entry: Dict[str, Any],
    *,
    source: Source,
    category: str,
    now: datetime,
    counter: FallbackCounter,
) -> Article:
    """
    Convert a raw feed entry into an Article.

    Missing fields never raise: author falls back to the source label (then
    "News Desk"), the date to `now`, the image to a category placeholder.
    Title and url may come back empty; the pipeline drops such articles.
    """
    fields = parse_entry(entry, now)

    return Article(
        id=fields["id"],
        title=fields["title"],
        excerpt=fields["excerpt"],
        image=resolve_image(entry, category, counter=counter),
        category=category,
        author=fields["author"] or source.label or DEFAULT_AUTHOR,
        published_at=fields["published_at"],
        url=fields["link"],
        source=source.label,
    )
