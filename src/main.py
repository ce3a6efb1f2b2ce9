#!/usr/bin/env python3
"""
Page field scraper

Fetches a fixed list of URLs concurrently (one thread per URL) and extracts
title, meta description, links and h1-h3 headings from each page. Failed URLs
are logged and skipped; the rest are written to a JSON file keyed by URL.

Modes:
- fields     title/description/links/headings per URL (default)
- headlines  heuristic headline texts per URL
- check      print whether each URL answers with HTTP 200

Usage:
  pip install requests beautifulsoup4
  python main.py https://example.com https://www.python.org --output data.json --verbose

"""

import argparse
import logging
import sys
from urllib.parse import urlparse

from configs import DEFAULT_DELAY, DEFAULT_OUTPUT, EXAMPLE_URLS, REQUEST_TIMEOUT, USER_AGENT, ScraperConfig
from crawler import configure_logging, scrape_headlines_many, scrape_many
from download_utils import is_url_reachable, make_session
from errors import ScrapeError
from io_helpers import save_json
# ---------- CLI ----------

def positive_int(value):
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return n


def build_parser():
    parser = argparse.ArgumentParser(description="Concurrent page field scraper: title, description, links, headings")
    parser.add_argument("urls", nargs="*", default=EXAMPLE_URLS, help="URLs to scrape (defaults to a built-in example list)")
    parser.add_argument("--mode", choices=["fields", "headlines", "check"], default="fields")
    parser.add_argument("--delay", type=float, default=DEFAULT_DELAY, help="Seconds to sleep before each request")
    parser.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT, help="Per-request timeout in seconds")
    parser.add_argument("--user-agent", default=USER_AGENT)
    parser.add_argument("--workers", type=positive_int, default=None, help="Cap on concurrent requests (default: one per URL)")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="JSON file for scraped results")
    parser.add_argument("--logfile", type=str, default=None, help="Optional rotating logfile path")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose console logging (DEBUG)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(logfile=args.logfile, verbose=args.verbose)

    urls = []
    for u in args.urls:
        if not urlparse(u).scheme:
            logging.warning("Skipping URL without scheme (http:// or https://): %s", u)
            continue
        urls.append(u)
    if not urls:
        logging.error("No valid URLs to scrape")
        return 1

    config = ScraperConfig(user_agent=args.user_agent, delay=args.delay, timeout=args.timeout)

    if args.mode == "check":
        session = make_session(config.user_agent)
        try:
            for u in urls:
                state = "reachable" if is_url_reachable(session, u, timeout=config.timeout) else "unreachable"
                print(f"{u}: {state}")
        finally:
            session.close()
        return 0

    if args.mode == "headlines":
        results = scrape_headlines_many(urls, config, max_workers=args.workers)
    else:
        results = {u: data.to_dict() for u, data in scrape_many(urls, config, max_workers=args.workers).items()}

    try:
        save_json(args.output, results)
    except ScrapeError as exc:
        logging.error("Could not save results: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
