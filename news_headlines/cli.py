"""Command-line front end: `news-headlines --url URL | --all [--sentiment]`."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import SCORERS, load_settings
from .core import HeadlineFetcher, RunResult
from .exceptions import NewsHeadlinesError
from .sentiment import ScoreOptions


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Log to stderr so stdout carries only results."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="news-headlines",
        description="Extract headlines from news homepages and optionally score their sentiment",
    )

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument('--url', type=str, help='URL to scrape')
    mode.add_argument('--all', action='store_true', help='Scrape every known news source')

    parser.add_argument(
        '--sentiment',
        action='store_true',
        help='Score each headline and print the overall sentiment'
    )
    parser.add_argument(
        '--scorer',
        type=str,
        choices=list(SCORERS),
        default=None,
        help='Sentiment provider (default: NEWS_HEADLINES_SCORER or vader)'
    )
    parser.add_argument('--model', type=str, default=None, help='Model name for LLM scorers')
    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='Timeout in seconds for page fetches and LLM scorer calls (default: none for fetches)'
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=None,
        help='Concurrent fetches in --all mode (default: 1, sequential)'
    )
    parser.add_argument(
        '--skip-failed',
        action='store_true',
        default=None,
        help='In --all mode, skip sources that fail to fetch instead of aborting'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    return parser


def print_result(result: RunResult, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    if result.report is None:
        for headline in result.headlines:
            print(headline, file=out)
        return

    for r in result.report.results:
        print(f"Headline: {r.headline}", file=out)
        print(f"Sentiment: {r.score}", file=out)
        print(file=out)
    print(f"Overall Sentiment: {result.report.average_score}", file=out)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")

    try:
        settings = load_settings()
        timeout = args.timeout if args.timeout is not None else settings.timeout
        score_options = ScoreOptions(
            provider=args.scorer or settings.scorer,
            model=args.model or settings.model,
        )
        if timeout is not None:
            score_options.timeout_sec = timeout
        fetcher = HeadlineFetcher(
            sentiment=args.sentiment,
            score_options=score_options,
            skip_failed=settings.skip_failed if args.skip_failed is None else args.skip_failed,
            max_workers=args.workers or settings.workers,
            timeout=timeout,
        )
        result = fetcher.run(args.url, all_sources=args.all)
    except NewsHeadlinesError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print_result(result)
    return 0
