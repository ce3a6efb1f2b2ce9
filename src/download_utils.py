import logging
import time

import requests

from configs import REQUEST_TIMEOUT, USER_AGENT
from errors import HTTPStatusError, RequestError, TransportError


# requests raises these before anything goes on the wire
_REQUEST_BUILD_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
)


def make_session(user_agent=USER_AGENT):
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})
    return session


def fetch_page(session, url, config):
    """
    GET `url` and return the response when the status is exactly 200.

    Raises RequestError when the request cannot be built, TransportError on
    network failures and HTTPStatusError for any other status code.
    """
    start = time.perf_counter()
    try:
        resp = session.get(url, headers={"User-Agent": config.user_agent}, timeout=config.timeout)
    except _REQUEST_BUILD_ERRORS as exc:
        raise RequestError(f"cannot send request: {exc}", url=url) from exc
    except requests.exceptions.RequestException as exc:
        raise TransportError(f"request failed: {exc}", url=url) from exc
    elapsed = time.perf_counter() - start
    logging.debug("GET %s -> %s in %.2fs", url, resp.status_code, elapsed)
    if resp.status_code != 200:
        raise HTTPStatusError(resp.status_code, url=url)
    return resp


def declared_charset(resp):
    # requests assumes ISO-8859-1 for text/* without a charset; only trust an explicit one
    ctype = resp.headers.get("Content-Type", "") or ""
    if "charset=" not in ctype.lower():
        return None
    return getattr(resp, "encoding", None)


def is_url_reachable(session, url, timeout=REQUEST_TIMEOUT):
    try:
        resp = session.get(url, timeout=timeout)
    except requests.exceptions.RequestException:
        logging.debug("Unreachable: %s", url)
        return False
    return resp.status_code == 200
