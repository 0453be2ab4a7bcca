"""
ph_news

Aggregates Philippine news RSS/Atom feeds into one normalized article list,
served as JSON by a small FastAPI app.

Core ideas:
- Input: a static list of labelled feed sources
- Process: fetch → classify → normalize → filter → deduplicate → sort (newest first) → limit
- Output: List[Article], served on GET /api/articles

Example
-------
from ph_news import ArticleAggregator

for article in ArticleAggregator(limit=10).collect():
    print(article.published_at, article.source, article.title)
"""
from .models import Article, Feed, Source
from .core import ArticleAggregator, aggregate
from .images import FallbackCounter

__all__ = [
    "Article",
    "Feed",
    "Source",
    "ArticleAggregator",
    "aggregate",
    "FallbackCounter",
]
