import logging
import queue
from concurrent.futures import ThreadPoolExecutor
from logging.handlers import RotatingFileHandler

from download_utils import make_session
from errors import ScrapeError
from scraper import scrape_headlines, scrape_url


def configure_logging(logfile=None, verbose=False):
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    # console handler
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    root_logger.addHandler(ch)
    # file handler
    if logfile:
        fh = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(formatter)
        fh.setLevel(logging.DEBUG)
        root_logger.addHandler(fh)


def scrape_many(urls, config, session=None, max_workers=None, scrape=scrape_url):
    """
    Run `scrape(session, url, config)` once per URL in parallel and return
    a dict mapping each successfully scraped URL to its result.

    Workers never touch the result dict: each one puts exactly one
    (url, data, error) tuple on a queue sized to the URL count, and this
    function is the only consumer. Failed URLs are logged and left out.
    One thread per URL unless `max_workers` caps the pool.
    """
    urls = list(urls)
    results = {}
    if not urls:
        return results

    own_session = session is None
    if own_session:
        session = make_session(config.user_agent)

    outcomes = queue.Queue(maxsize=len(urls))

    def run_one(url):
        try:
            data = scrape(session, url, config)
        except Exception as exc:
            outcomes.put((url, None, exc))
        except BaseException as exc:
            # the collector still needs one outcome per URL
            outcomes.put((url, None, exc))
            raise
        else:
            outcomes.put((url, data, None))

    failed = 0
    executor = ThreadPoolExecutor(max_workers=max_workers or len(urls))
    try:
        for url in urls:
            executor.submit(run_one, url)

        for _ in range(len(urls)):
            url, data, error = outcomes.get()
            if error is None:
                results[url] = data
                continue
            failed += 1
            if isinstance(error, ScrapeError):
                logging.warning("Failed to scrape %s: %s", url, error)
            else:
                logging.error("Unexpected error scraping %s", url, exc_info=error)
    finally:
        executor.shutdown(wait=True)
        if own_session:
            session.close()

    logging.info("Scraped %d/%d URLs (%d failed)", len(results), len(urls), failed)
    return results


def scrape_headlines_many(urls, config, session=None, max_workers=None):
    return scrape_many(urls, config, session=session, max_workers=max_workers, scrape=scrape_headlines)
