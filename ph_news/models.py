from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class Source:
    """One configured feed with a human-readable label."""
    label: str
    url: str


@dataclass(frozen=True)
class Feed:
    """A successfully fetched and parsed feed: channel title plus raw entries."""
    title: str
    entries: List[Dict[str, Any]] = field(default_factory=list)


def to_iso8601(value: datetime) -> str:
    """Render a datetime as UTC ISO-8601 with millisecond precision and a Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class Article:
    """
    Canonical, normalized representation of one feed item.

    WARNING: Do not change fields lightly. `to_dict` is the JSON contract of
    `/api/articles` consumed by the front-end.
    """
    id: str
    title: str
    excerpt: str
    image: str
    category: str
    author: str
    published_at: datetime
    url: str
    source: str
    tags: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "excerpt": self.excerpt,
            "image": self.image,
            "category": self.category,
            "author": self.author,
            "publishedAt": to_iso8601(self.published_at),
            "url": self.url,
            "tags": list(self.tags),
            "source": self.source,
        }
