#!/usr/bin/env python3
"""
Command-line entry point: extract a single mobile.de listing and print it.
"""
import argparse
import asyncio
import json
import os
import sys
from dataclasses import asdict

from .core import BrowserSettings
from .errors import ExtractionError
from .scraper import extract_listing
from .utils import init_logger


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Extract title, price, key facts and description from a mobile.de listing")
    ap.add_argument("url", help="Listing URL")
    ap.add_argument("--show-browser", action="store_true", help="Run with a visible browser window")
    ap.add_argument("--nav-timeout", type=int, default=60_000, help="Navigation timeout in ms")
    ap.add_argument("--settle-timeout", type=int, default=3_500, help="Max wait for dynamic widgets in ms")
    ap.add_argument("--json", action="store_true", help="Print the fields as JSON instead of the prompt block")
    lvl_choices = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    ap.add_argument("--log-level", choices=lvl_choices, default=os.getenv("LOG_LEVEL", "INFO"),
                    help="Console log level")
    ap.add_argument("--log-file-path", default=os.getenv("LOG_FILE_PATH", "listing_scraper.log"),
                    help="Log file path")
    ap.add_argument("--no-file-log", action="store_true", help="Disable file logging")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = init_logger(
        console_level=args.log_level,
        log_file=None if args.no_file_log else args.log_file_path,
    )

    settings = BrowserSettings(
        headless=not args.show_browser,
        navigation_timeout_ms=args.nav_timeout,
        settle_timeout_ms=args.settle_timeout,
    )

    try:
        listing = asyncio.run(extract_listing(args.url, settings))
    except ExtractionError as e:
        logger.error(f">>> {e}")
        return 1

    if args.json:
        print(json.dumps(asdict(listing), ensure_ascii=False, indent=2))
    else:
        print(listing.to_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
