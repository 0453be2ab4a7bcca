from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .config import Settings
from .core import ArticleAggregator


logger = logging.getLogger(__name__)

CACHE_CONTROL = "s-maxage=300, stale-while-revalidate=60"
ERROR_BODY = {"error": "Failed to load articles"}


class ArticleOut(BaseModel):
    id: str
    title: str
    excerpt: str
    image: str
    category: str
    author: str
    publishedAt: str
    url: str
    tags: List[str]
    source: str


class ErrorOut(BaseModel):
    error: str


def create_app(
    settings: Optional[Settings] = None,
    aggregator: Optional[ArticleAggregator] = None,
) -> FastAPI:
    settings = settings or Settings()
    app = FastAPI(
        title="PH News Update API",
        description="Aggregated Philippine news headlines from public RSS feeds",
        version="0.1.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    # One aggregator per process so the fallback counter outlives requests
    app.state.aggregator = aggregator or ArticleAggregator(
        timeout=settings.feed_timeout,
        limit=settings.article_limit,
    )

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    @app.get(
        "/api/articles",
        response_model=List[ArticleOut],
        responses={500: {"model": ErrorOut}},
    )
    def get_articles(request: Request, response: Response):
        try:
            payload = [a.to_dict() for a in request.app.state.aggregator.collect()]
        except Exception:
            # Per-source failures are absorbed upstream; this is the pipeline itself
            logger.exception("Failed to load articles")
            return JSONResponse(status_code=500, content=ERROR_BODY)

        response.headers["Cache-Control"] = CACHE_CONTROL
        return payload

    return app
