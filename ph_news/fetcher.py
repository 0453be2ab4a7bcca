from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Tuple

import feedparser
import requests

from .config import DEFAULT_TIMEOUT_SEC
from .exceptions import FeedFetchError
from .models import Feed, Source


logger = logging.getLogger(__name__)

USER_AGENT = "ph-news/0.1 (+https://ph-news-update-now.vercel.app)"


def build_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def fetch_feed(
    source: Source,
    *,
    timeout: float = DEFAULT_TIMEOUT_SEC,
    session: Optional[requests.Session] = None,
) -> Feed:
    """
    Fetch a single source and parse it into a Feed.

    Raises FeedFetchError on network errors, timeouts, HTTP error statuses or
    when the document is malformed (bozo) and nothing could be recovered.
    """
    if session is None:
        with build_session() as owned:
            return fetch_feed(source, timeout=timeout, session=owned)

    try:
        response = session.get(source.url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise FeedFetchError(f"Failed to fetch feed: {source.label} {source.url} ({e})") from e

    try:
        parsed = feedparser.parse(response.content)
    except Exception as e:
        raise FeedFetchError(f"Failed to parse feed: {source.label} {source.url} ({e})") from e
    entries = list(getattr(parsed, "entries", None) or [])

    if getattr(parsed, "bozo", 0):
        exc = getattr(parsed, "bozo_exception", None)
        if not entries:
            msg = f"Invalid RSS/Atom feed: {source.label} {source.url}"
            if exc:
                msg += f" ({exc})"
            raise FeedFetchError(msg)
        # Lenient: feedparser recovered items from a slightly broken document
        logger.warning("Feed parse issue for %s: %s", source.label, exc)

    channel = getattr(parsed, "feed", None) or {}
    title = (channel.get("title") or "").strip()
    return Feed(title=title, entries=entries)


def fetch_all(
    sources: Iterable[Source],
    *,
    timeout: float = DEFAULT_TIMEOUT_SEC,
    session: Optional[requests.Session] = None,
) -> Iterator[Tuple[Source, Feed]]:
    """
    Fetch sources one after another, yielding (source, feed) for each success.

    Failures on individual sources are logged and skipped; the batch always
    continues with the remaining sources.
    """
    if session is None:
        with build_session() as owned:
            yield from fetch_all(sources, timeout=timeout, session=owned)
        return

    for source in sources:
        try:
            feed = fetch_feed(source, timeout=timeout, session=session)
        except FeedFetchError as e:
            logger.warning("RSS fail: %s %s", source.label, e)
            continue
        logger.debug("Fetched %d entries from %s", len(feed.entries), source.label)
        yield source, feed
