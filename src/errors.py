class ScrapeError(Exception):
    """Base class for every classified scraping failure."""

    def __init__(self, message, url=None):
        super().__init__(message)
        self.url = url


class RequestError(ScrapeError):
    """The request could not be built or sent (bad URL, unsupported scheme)."""


class TransportError(ScrapeError):
    """Network level failure: connection refused, DNS, timeout, reset."""


class HTTPStatusError(ScrapeError):
    def __init__(self, status_code, url=None):
        super().__init__(f"unexpected status {status_code}", url=url)
        self.status_code = status_code


class ParseError(ScrapeError):
    """The response body could not be parsed as HTML."""


class SerializationError(ScrapeError):
    pass


class FileError(ScrapeError):
    pass
