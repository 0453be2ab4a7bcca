"""
Field extractors for raw feed entries.

Feed dialects expose the same logical field under different keys. Each field
is described by an ordered tuple of (name, accessor) rules; the first accessor
returning a non-empty string wins.
"""
from __future__ import annotations

import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup


Entry = Dict[str, Any]
Rule = Tuple[str, Callable[[Entry], Any]]


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return None


def first_match(entry: Entry, rules: Sequence[Rule]) -> Optional[str]:
    for _name, accessor in rules:
        value = _text(accessor(entry))
        if value:
            return value
    return None


def content_values(entry: Entry) -> List[str]:
    """HTML bodies from `content` (content:encoded in RSS, <content> in Atom)."""
    out: List[str] = []
    content = entry.get("content")
    if isinstance(content, dict):
        content = [content]
    if isinstance(content, list):
        for c in content:
            if isinstance(c, dict) and isinstance(c.get("value"), str):
                out.append(c["value"])
    elif isinstance(content, str):
        out.append(content)
    return out


def _first_content(entry: Entry) -> Optional[str]:
    for value in content_values(entry):
        if value.strip():
            return value
    return None


def _author_detail_name(entry: Entry) -> Optional[str]:
    detail = entry.get("author_detail")
    if isinstance(detail, dict):
        return detail.get("name")
    return None


ID_RULES: Tuple[Rule, ...] = (
    ("guid", lambda e: e.get("guid")),
    ("id", lambda e: e.get("id")),
    ("link", lambda e: e.get("link")),
)

EXCERPT_RULES: Tuple[Rule, ...] = (
    ("summary", lambda e: e.get("summary")),
    ("description", lambda e: e.get("description")),
    ("content", _first_content),
)

AUTHOR_RULES: Tuple[Rule, ...] = (
    ("author", lambda e: e.get("author")),
    ("author_detail", _author_detail_name),
    ("creator", lambda e: e.get("creator")),
)

# Seed for the deterministic image fallback
SEED_RULES: Tuple[Rule, ...] = ID_RULES + (
    ("title", lambda e: e.get("title")),
)


def strip_html(text: Optional[str]) -> str:
    """Drop HTML markup, collapse whitespace runs to one space, trim."""
    if not text:
        return ""
    # Also decodes entities left escaped in plain-text descriptions
    text = BeautifulSoup(text, "html.parser").get_text(" ")
    return " ".join(text.split())


def _from_struct_time(val: Any) -> Optional[datetime]:
    # feedparser normalizes *_parsed values to UTC
    if isinstance(val, time.struct_time) or (isinstance(val, tuple) and len(val) >= 6):
        try:
            return datetime(*val[:6], tzinfo=timezone.utc)
        except (TypeError, ValueError):
            return None
    return None


def _from_string(val: Any) -> Optional[datetime]:
    if not isinstance(val, str) or not val.strip():
        return None
    s = val.strip()
    try:
        dt = parsedate_to_datetime(s)
    except (TypeError, ValueError, IndexError):
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError:
            return None
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _to_datetime(entry: Entry) -> Optional[datetime]:
    """
    Convert feed entry date fields to timezone-aware UTC datetime.
    Priority: published_parsed -> updated_parsed -> created_parsed -> raw strings.
    """
    for key in ("published_parsed", "updated_parsed", "created_parsed"):
        dt = _from_struct_time(entry.get(key))
        if dt:
            return dt
    for key in ("published", "pubDate", "updated", "created"):
        dt = _from_string(entry.get(key))
        if dt:
            return dt
    return None


def parse_published(entry: Entry, now: datetime) -> datetime:
    """Publish date clamped to `now`; `now` itself when nothing parses."""
    dt = _to_datetime(entry)
    if dt is None or dt > now:
        return now
    return dt


def parse_entry(entry: Entry, now: datetime) -> Dict[str, Any]:
    """
    Map a raw feedparser entry to a dict of the text fields an Article needs.
    Fields: id, title, excerpt, author (None when absent), link, published_at
    """
    return {
        "id": first_match(entry, ID_RULES) or "",
        "title": _text(entry.get("title")) or "",
        "excerpt": strip_html(first_match(entry, EXCERPT_RULES)),
        "author": first_match(entry, AUTHOR_RULES),
        "link": _text(entry.get("link")) or "",
        "published_at": parse_published(entry, now),
    }
