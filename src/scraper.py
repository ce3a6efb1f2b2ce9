import logging
import time

from download_utils import declared_charset, fetch_page
from html_parsing import extract_fields, extract_headlines, parse_document


def _fetch_document(session, url, config):
    # fixed delay, not coordinated with other in-flight requests
    if config.delay > 0:
        time.sleep(config.delay)
    logging.info("Scraping: %s", url)
    resp = fetch_page(session, url, config)
    return parse_document(resp.content, url=url, encoding=declared_charset(resp))


def scrape_url(session, url, config):
    soup = _fetch_document(session, url, config)
    data = extract_fields(soup)
    logging.debug("Extracted %s: %d links, %d headings", url, len(data.links), len(data.headings))
    return data


def scrape_headlines(session, url, config):
    soup = _fetch_document(session, url, config)
    return extract_headlines(soup)
