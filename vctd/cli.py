"""Command line entry point: scrape a vlr.gg event or analyze a dataset."""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from typing import List, Optional

from .analyzer import composition_frequencies, list_maps
from .config import get_config
from .crawler import EventCrawler
from .exceptions import DatasetError, InvalidEventUrlError, VctdError
from .storage import dump_matches, load_matches

logger = logging.getLogger(__name__)

EVENT_URL_RE = re.compile(r"https?://(www\.)?vlr\.gg\b([-a-zA-Z0-9()@:%_+.~#?&/=]*)")


def validate_event_url(url: str) -> str:
    """Return ``url`` if it is a vlr.gg URL without a trailing slash."""
    if not EVENT_URL_RE.match(url):
        raise InvalidEventUrlError("Invalid vlr.gg url", url=url)
    if url.endswith("/"):
        raise InvalidEventUrlError("Don't include / at the end of the url", url=url)
    return url


def _event_url(value: str) -> str:
    try:
        return validate_event_url(value)
    except InvalidEventUrlError as e:
        raise argparse.ArgumentTypeError(e.message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vctd",
        description="Data scraper and analyzer for VCT (from vlr.gg)",
    )
    parser.add_argument("--log-level", help="Logging level (default: VCTD_LOG_LEVEL or INFO)")
    commands = parser.add_subparsers(dest="command", required=True)

    scrape = commands.add_parser("scrape", help="Scrape vlr.gg event")
    scrape.add_argument("event_url", type=_event_url, help="VLR.gg URL of the event to parse")
    scrape.add_argument("-o", "--output", required=True, help="Output file")
    scrape.add_argument("--delay", type=float, help="Seconds to wait between requests")

    analyze = commands.add_parser("analyze", help="Analyze scraped data")
    analyze.add_argument("data_path", help="JSON data file path")
    analyze_commands = analyze.add_subparsers(dest="subcommand", required=True)

    maps = analyze_commands.add_parser("maps", help="analyze maps")
    maps.add_argument("map_name", nargs="?", help="Map to analyze")
    maps.add_argument("-m", "--meta", action="store_true", help="To analyze meta")
    maps.add_argument("-l", "--list", action="store_true", help="List all maps in dataset")
    return parser


def check_output_path(path: str) -> None:
    """Fail before crawling when ``path`` cannot be written."""
    directory = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(directory):
        raise DatasetError("Output directory does not exist", context={"path": path})
    if os.path.isdir(path) or not os.access(directory, os.W_OK):
        raise DatasetError("Output file is not writable", context={"path": path})


def run_scrape(args: argparse.Namespace) -> int:
    check_output_path(args.output)
    crawler = EventCrawler()
    if args.delay is not None:
        crawler.fetcher.delay = args.delay
    try:
        matches = crawler.crawl(args.event_url)
    finally:
        crawler.fetcher.close()
    dump_matches(matches, args.output)
    return 0


def run_analyze_maps(args: argparse.Namespace) -> int:
    matches = load_matches(args.data_path)

    if args.list:
        for m in sorted(list_maps(matches), key=lambda x: x.name):
            print(m.name)
        return 0

    if not any(m.map.name == args.map_name for m in matches):
        logger.error(f"Map '{args.map_name}' does not appear in {args.data_path}")
        return 1

    if args.meta:
        for composition, rate in composition_frequencies(matches, args.map_name):
            print(f"{rate:7.2%}  {', '.join(agent.name for agent in composition)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "analyze":
        if args.list and args.map_name:
            parser.error("--list cannot be combined with a map name")
        if not args.list and not args.map_name:
            parser.error("a map name is required unless --list is given")

    level = (args.log_level or get_config().log_level).upper()
    known_level = isinstance(logging.getLevelName(level), int)
    logging.basicConfig(
        level=level if known_level else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    if not known_level:
        logger.error(f"Error: unknown log level '{level}'")
        return 1

    try:
        if args.command == "scrape":
            return run_scrape(args)
        return run_analyze_maps(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except VctdError as e:
        logger.error(f"Error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
