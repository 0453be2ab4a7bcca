from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Sequence

import requests

from .classifier import to_category
from .config import DEFAULT_ARTICLE_LIMIT, DEFAULT_TIMEOUT_SEC
from .dedup import deduplicate
from .exceptions import AggregationError
from .fetcher import fetch_all
from .images import FallbackCounter
from .models import Article, Feed, Source
from .normalizer import to_article
from .sources import SOURCES


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def aggregate(articles: Iterable[Article], *, limit: int = DEFAULT_ARTICLE_LIMIT) -> List[Article]:
    """Filter, deduplicate by title, sort newest first (stable) and truncate."""
    items = deduplicate(articles)
    # list.sort is stable, so equal timestamps keep source/feed order
    items.sort(key=lambda x: x.published_at, reverse=True)
    if limit and limit > 0:
        items = items[:limit]
    return items


def normalize_feed(
    source: Source,
    feed: Feed,
    *,
    now: datetime,
    counter: FallbackCounter,
) -> List[Article]:
    """Normalize every entry of one feed; malformed entries are skipped."""
    category = to_category(source.label, feed.title)
    out: List[Article] = []
    for entry in feed.entries:
        try:
            out.append(to_article(entry, source=source, category=category, now=now, counter=counter))
        except Exception as e:
            logger.debug("Skipping malformed entry from %s: %s", source.label, e)
            continue
    return out


class ArticleAggregator:
    """
    High-level API: fetch the configured feeds and return the article list.

    Pipeline: fetch → classify → normalize → filter → deduplicate → sort (newest first) → limit
    """

    def __init__(
        self,
        sources: Optional[Sequence[Source]] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        limit: int = DEFAULT_ARTICLE_LIMIT,
        session: Optional[requests.Session] = None,
        counter: Optional[FallbackCounter] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.sources = tuple(SOURCES if sources is None else sources)
        self.timeout = timeout
        self.limit = limit
        self.session = session
        self.counter = counter or FallbackCounter()
        self.clock = clock

    def collect(self) -> List[Article]:
        """
        Run the pipeline once. Individual source failures are absorbed;
        anything else is raised as AggregationError.
        """
        try:
            items: List[Article] = []
            for source, feed in fetch_all(self.sources, timeout=self.timeout, session=self.session):
                items.extend(normalize_feed(source, feed, now=self.clock(), counter=self.counter))
            result = aggregate(items, limit=self.limit)
        except Exception as e:
            raise AggregationError(f"Article aggregation failed: {e}") from e

        logger.info("Aggregated %d articles from %d sources", len(result), len(self.sources))
        return result
