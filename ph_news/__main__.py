from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from .config import Settings, configure_logging
from .core import ArticleAggregator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ph-news", description="PH news feed aggregator")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    fetch = sub.add_parser("fetch", help="aggregate once and print the JSON array")
    fetch.add_argument("--limit", type=int, default=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    if args.command == "serve":
        import uvicorn

        from .api import create_app

        uvicorn.run(
            create_app(settings),
            host=args.host or settings.host,
            port=args.port or settings.port,
            log_level=settings.log_level.lower(),
        )
        return 0

    aggregator = ArticleAggregator(
        timeout=settings.feed_timeout,
        limit=args.limit if args.limit and args.limit > 0 else settings.article_limit,
    )
    articles = aggregator.collect()
    json.dump([a.to_dict() for a in articles], sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
