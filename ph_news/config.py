from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv


DEFAULT_TIMEOUT_SEC = 15.0
MIN_TIMEOUT_SEC = 10.0
MAX_TIMEOUT_SEC = 15.0
DEFAULT_ARTICLE_LIMIT = 100

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass
class Settings:
    feed_timeout: float = DEFAULT_TIMEOUT_SEC
    article_limit: int = DEFAULT_ARTICLE_LIMIT
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = field(default_factory=lambda: ("*",))
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Settings":
        """
        Build settings from the environment, reading a `.env` file first if present.

        The fetch timeout is kept inside the 10-15 second window; a non-positive
        article limit falls back to the default.
        """
        load_dotenv(dotenv_path)

        timeout = _env_float("PH_NEWS_FEED_TIMEOUT", DEFAULT_TIMEOUT_SEC)
        timeout = min(max(timeout, MIN_TIMEOUT_SEC), MAX_TIMEOUT_SEC)

        limit = _env_int("PH_NEWS_ARTICLE_LIMIT", DEFAULT_ARTICLE_LIMIT)
        if limit <= 0:
            limit = DEFAULT_ARTICLE_LIMIT

        origins = tuple(
            o.strip() for o in (os.getenv("PH_NEWS_CORS_ORIGINS") or "*").split(",") if o.strip()
        )

        return cls(
            feed_timeout=timeout,
            article_limit=limit,
            log_level=(os.getenv("PH_NEWS_LOG_LEVEL") or "INFO").upper(),
            cors_origins=origins or ("*",),
            host=os.getenv("PH_NEWS_HOST") or "127.0.0.1",
            port=_env_int("PH_NEWS_PORT", 8000),
        )


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the package logger (idempotent)."""
    logger = logging.getLogger("ph_news")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
