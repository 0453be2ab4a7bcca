"""
Image resolution for feed entries.

Tries, in order: enclosure, media:content, thumbnail/icon extensions, a
generic `image` field, then <img> tags in embedded HTML. When nothing is
found a category placeholder is chosen deterministically from the item's
identity, so the same article maps to the same placeholder across runs.
"""
from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from bs4 import BeautifulSoup

from .parser import Entry, Rule, SEED_RULES, content_values, first_match
from .sources import CATEGORY_IMAGES, DEFAULT_CATEGORY, FALLBACK_IMAGE


def stable_hash(value: str) -> int:
    """
    32-bit `h = h * 31 + c` string hash over UTF-16 code units, absolute value.

    Unlike the builtin hash() this does not vary between processes.
    """
    h = 0
    data = value.encode("utf-16-le")
    for i in range(0, len(data), 2):
        h = (h * 31 + (data[i] | (data[i + 1] << 8))) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


class FallbackCounter:
    """
    Per-category round-robin index for items that have no identity to hash.

    Lives for the process (or until reset()). Calls are serialized by a lock,
    but which request gets which index under concurrency is not deterministic.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._index: Dict[str, int] = {}

    def next(self, category: str, pool_size: int) -> int:
        if pool_size <= 0:
            raise ValueError("pool_size must be positive")
        with self._lock:
            idx = (self._index.get(category, 0) + 1) % pool_size
            self._index[category] = idx
            return idx

    def reset(self) -> None:
        with self._lock:
            self._index.clear()


def _url_of(obj: Any, keys: Sequence[str] = ("url", "href")) -> Optional[str]:
    # Single object or first of an array
    if isinstance(obj, (list, tuple)):
        obj = obj[0] if obj else None
    if isinstance(obj, str):
        return obj
    if isinstance(obj, Mapping):
        for k in keys:
            v = obj.get(k)
            if isinstance(v, str) and v.strip():
                return v
    return None


def _enclosure(entry: Entry) -> Optional[str]:
    url = _url_of(entry.get("enclosures")) or _url_of(entry.get("enclosure"))
    if url:
        return url
    for link in entry.get("links") or []:
        if isinstance(link, Mapping) and link.get("rel") == "enclosure":
            url = _url_of(link)
            if url:
                return url
    return None


def _generic_image(entry: Entry) -> Optional[str]:
    return _url_of(entry.get("image"), ("href", "url"))


IMAGE_RULES: Tuple[Rule, ...] = (
    ("enclosure", _enclosure),
    ("media_content", lambda e: _url_of(e.get("media_content"))),
    ("media_thumbnail", lambda e: _url_of(e.get("media_thumbnail"))),
    ("itunes_image", lambda e: _url_of(e.get("itunes_image"), ("href", "url"))),
    ("image", _generic_image),
)


def first_from_srcset(srcset: str) -> Optional[str]:
    first = srcset.split(",")[0].strip()
    url = first.split(" ")[0] if first else ""
    return url or None


def image_from_html(html: str) -> Optional[str]:
    """First <img> data-src, else first srcset candidate, else src."""
    if not html or "<img" not in html.lower():
        return None
    soup = BeautifulSoup(html, "html.parser")

    imgs = soup.find_all("img")

    for tag in imgs:
        url = (tag.get("data-src") or "").strip()
        if url:
            return url
    for tag in imgs:
        url = first_from_srcset(tag.get("srcset") or "")
        if url:
            return url
    for tag in imgs:
        url = (tag.get("src") or "").strip()
        if url:
            return url
    return None


def _html_bodies(entry: Entry) -> Iterable[str]:
    # content:encoded first, then the description/content body
    yield from content_values(entry)
    for key in ("summary", "description"):
        value = entry.get(key)
        if isinstance(value, str):
            yield value


def pick_image(entry: Entry) -> Optional[str]:
    """Image carried by the entry itself, or None."""
    url = first_match(entry, IMAGE_RULES)
    if url:
        return url
    for html in _html_bodies(entry):
        url = image_from_html(html)
        if url:
            return url
    return None


def fallback_image(category: str, seed: Optional[str], *, counter: FallbackCounter) -> str:
    pool = CATEGORY_IMAGES.get(category) or CATEGORY_IMAGES.get(DEFAULT_CATEGORY)
    if not pool:
        return FALLBACK_IMAGE
    if seed:
        return pool[stable_hash(seed) % len(pool)]
    return pool[counter.next(category, len(pool))]


def resolve_image(entry: Entry, category: str, *, counter: FallbackCounter) -> str:
    """Entry image if any, else the category placeholder. Never empty."""
    return pick_image(entry) or fallback_image(category, first_match(entry, SEED_RULES), counter=counter)
