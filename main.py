#!/usr/bin/env python
"""CLI for retrieving and cleaning Newsriver articles."""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from newsriver.config import (
    create_from_config,
    get_default_config_path,
    load_config,
    normalize_options,
)
from newsriver.credentials import store_creds
from newsriver.data import DayProgress
from newsriver.errors import NewsriverError
from newsriver.normalize import clean_news

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments for a search."""

    query: str = Field(min_length=1)
    from_date: date | None = None
    to_date: date | None = None
    language: str | None = None
    limit: int | None = Field(default=None, ge=1, le=100)
    config: Path
    min_chars: int | None = Field(default=None, ge=0)
    tif: bool = False
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def _report_progress(progress: DayProgress) -> None:
    status = "ok" if progress.ok else f"failed ({progress.status_code})"
    print(f"[{progress.index}/{progress.total}] {progress.day}: {progress.rows} articles, {status}")


def run(args: CLIArgs) -> None:
    """Retrieve, clean and summarise articles for the given arguments.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    client, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    logger.info(f"Searching Newsriver for: {args.query}")
    logger.info(f"Config: {args.config}")

    news = client.search(
        args.query,
        from_date=args.from_date,
        to_date=args.to_date,
        language=args.language or config.search.language,
        limit=args.limit or config.search.limit,
        on_progress=_report_progress,
    )
    logger.info(f"\nRetrieved {len(news)} articles")
    if news.empty:
        return

    options = normalize_options(config.normalize)
    if args.min_chars is not None:
        options["min_chars"] = args.min_chars
    if args.tif:
        options["tif_corpus"] = True
    corpus = clean_news(news, **options)

    logger.info(f"Corpus has {len(corpus)} articles after cleaning:\n")
    logger.info(corpus.head(10).to_string())

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Retrieve and clean news from Newsriver.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search articles day by day")
    search.add_argument("query", help="Lucene query, e.g. 'title:Google AND text:Cloud'")
    search.add_argument("--from", dest="from_date", help="Start date (YYYY-MM-DD)")
    search.add_argument("--to", dest="to_date", help="End date (YYYY-MM-DD)")
    search.add_argument("--language", "-l", help="ISO 639-1 language code")
    search.add_argument("--limit", type=int, help="Maximum articles per day (1-100)")
    search.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    search.add_argument("--min-chars", type=int, help="Minimum characters of article text")
    search.add_argument(
        "--tif", action="store_true", default=False, help="Return a TIF compliant corpus"
    )
    search.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON log of every request",
    )
    search.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    creds = subparsers.add_parser("store-creds", help="Store API token and user agent")
    creds.add_argument("--path", type=Path, default=None, help="dotenv file to write")

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()

    if ns.command == "store-creds":
        store_creds(ns.path)
        return

    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            query=ns.query,
            from_date=ns.from_date,
            to_date=ns.to_date,
            language=ns.language,
            limit=ns.limit,
            config=config_path,
            min_chars=ns.min_chars,
            tif=ns.tif,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        run(args)
    except NewsriverError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
