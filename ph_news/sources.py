"""
Static, process-wide configuration: feed sources and placeholder images.

Edit and redeploy to change. Nothing here is mutated at runtime.
"""
from __future__ import annotations

from typing import Dict, Tuple

from .models import Source


SOURCES: Tuple[Source, ...] = (
    Source("PAGASA", "https://www.pagasa.dost.gov.ph/index.php/press-releases?format=feed&type=rss"),
    Source("DOLE", "https://www.dole.gov.ph/news/feed/"),
    Source("PIA", "https://pia.gov.ph/rss/articles"),
    Source("PTV", "https://www.ptvnews.ph/feed/"),
    Source("Inquirer", "https://newsinfo.inquirer.net/feed"),
    Source("Philstar", "https://www.philstar.com/rss/headlines"),
)

CATEGORIES: Tuple[str, ...] = (
    "Top", "Nation", "Metro", "Business", "World", "Sports", "Tech", "Showbiz",
)
DEFAULT_CATEGORY = "Top"

DEFAULT_AUTHOR = "News Desk"

# Used only when a category pool is empty
FALLBACK_IMAGE = "https://images.unsplash.com/photo-1519681393784-d120267933ba?q=80&w=1600&auto=format&fit=crop"

_UNSPLASH = "https://images.unsplash.com/{}?q=80&w=1600&auto=format&fit=crop"

CATEGORY_IMAGES: Dict[str, Tuple[str, ...]] = {
    "Top": tuple(_UNSPLASH.format(p) for p in (
        "photo-1519681393784-d120267933ba",
        "photo-1483721310020-03333e577078",
        "photo-1495020689067-958852a7765e",
    )),
    "Nation": tuple(_UNSPLASH.format(p) for p in (
        "photo-1500530855697-b586d89ba3ee",
        "photo-1554050857-c84a8abdb5e2",
        "photo-1477959858617-67f85cf4f1df",
    )),
    "Business": tuple(_UNSPLASH.format(p) for p in (
        "photo-1526304640581-d334cdbbf45e",
        "photo-1507679799987-c73779587ccf",
        "photo-1542744173-8e7e53415bb0",
    )),
    "Sports": tuple(_UNSPLASH.format(p) for p in (
        "photo-1517649763962-0c623066013b",
        "photo-1461896836934-ffe607ba8211",
        "photo-1502877338535-766e1452684a",
    )),
    "Tech": tuple(_UNSPLASH.format(p) for p in (
        "photo-1518779578993-ec3579fee39f",
        "photo-1518770660439-4636190af475",
        "photo-1518770660439-4636190af475",
    )),
    "World": tuple(_UNSPLASH.format(p) for p in (
        "photo-1446776811953-b23d57bd21aa",
        "photo-1500534314209-a25ddb2bd429",
        "photo-1526778548025-fa2f459cd5c1",
    )),
    "Metro": tuple(_UNSPLASH.format(p) for p in (
        "photo-1508057198894-247b23fe5ade",
        "photo-1494526585095-c41746248156",
        "photo-1486304873000-235643847519",
    )),
    "Showbiz": tuple(_UNSPLASH.format(p) for p in (
        "photo-1518895949257-7621c3c786d7",
        "photo-1499364615650-ec38552f4f34",
        "photo-1504674900247-0877df9cc836",
    )),
}
