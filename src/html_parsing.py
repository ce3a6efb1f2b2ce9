from bs4 import BeautifulSoup

from errors import ParseError
from models import ScrapedData

HEADING_SELECTOR = "h1, h2, h3"

# Overlapping on purpose: an <h2 class="headline"> is reported once per matching selector.
HEADLINE_SELECTORS = [
    "h1",
    "h2",
    "h3",
    '[class*="headline"]',
    '[class*="title"]',
    "article h2",
    ".headline a",
]
MIN_HEADLINE_LENGTH = 10


def parse_document(body, url=None, encoding=None):
    """
    Parse a response body into a document.

    Bytes are decoded by BeautifulSoup's own detection (BOM, <meta charset>,
    then fallbacks). `encoding` is a hint, only worth passing when the server
    declared a charset in its Content-Type header.
    """
    if body is None:
        raise ParseError("empty response body", url=url)
    from_encoding = encoding if isinstance(body, bytes) else None
    try:
        soup = BeautifulSoup(body, "html.parser", from_encoding=from_encoding)
    except Exception as exc:
        raise ParseError(f"cannot parse HTML: {exc}", url=url) from exc
    # set when every candidate encoding failed and bytes were replaced with U+FFFD
    if getattr(soup, "contains_replacement_characters", False):
        raise ParseError("cannot decode response body", url=url)
    return soup


def _text(el):
    return el.get_text().strip()


def extract_fields(soup):
    title_el = soup.find("title")
    title = _text(title_el) if title_el else ""

    meta = soup.find("meta", attrs={"name": "description"})
    description = (meta.get("content") or "") if meta else ""

    links = [a.get("href") for a in soup.select("a[href]")]

    headings = []
    for h in soup.select(HEADING_SELECTOR):
        text = _text(h)
        if text:
            headings.append(text)

    return ScrapedData(title=title, description=description, links=links, headings=headings)


def extract_headlines(soup, selectors=HEADLINE_SELECTORS, min_length=MIN_HEADLINE_LENGTH):
    """
    Collect candidate headline texts.

    Texts are trimmed and kept only when longer than `min_length` characters.
    Results follow selector order, then document order within a selector;
    the same element may appear several times when selectors overlap.
    """
    headlines = []
    for selector in selectors:
        for el in soup.select(selector):
            text = _text(el)
            if len(text) > min_length:
                headlines.append(text)
    return headlines
