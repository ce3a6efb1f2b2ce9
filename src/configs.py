from dataclasses import dataclass

USER_AGENT = "page-field-scraper/1.0 (+https://example.com)"
DEFAULT_DELAY = 1.0  # seconds slept before every request
REQUEST_TIMEOUT = 30
DEFAULT_OUTPUT = "scraped_data.json"

EXAMPLE_URLS = [
    "https://example.com",
    "https://www.python.org",
    "https://news.ycombinator.com",
    "https://httpbin.org/status/404",
]


@dataclass(frozen=True)
class ScraperConfig:
    user_agent: str = USER_AGENT
    delay: float = DEFAULT_DELAY
    timeout: float = REQUEST_TIMEOUT
