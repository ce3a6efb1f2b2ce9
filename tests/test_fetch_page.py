# -----------------------------
# File: tests/test_fetch_page.py
# -----------------------------
import pytest
import requests

from configs import ScraperConfig
from download_utils import declared_charset, fetch_page, is_url_reachable, make_session
from errors import HTTPStatusError, RequestError, TransportError


class DummyResp:
    def __init__(self, status=200, headers=None, text='ok'):
        self.status_code = status
        self.headers = headers or {'Content-Type': 'text/html'}
        self.text = text


class DummySession:
    def __init__(self, resp=None, exc=None):
        self.resp = resp
        self.exc = exc
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append((url, headers, timeout))
        if self.exc is not None:
            raise self.exc
        return self.resp


def test_fetch_page_returns_response_and_sends_user_agent():
    s = DummySession(DummyResp(200, text='<html>hello</html>'))
    cfg = ScraperConfig(user_agent='test-agent/0.1', delay=0, timeout=7)
    resp = fetch_page(s, 'https://example.com', cfg)
    assert 'hello' in resp.text
    url, headers, timeout = s.calls[0]
    assert url == 'https://example.com'
    assert headers == {'User-Agent': 'test-agent/0.1'}
    assert timeout == 7


def test_fetch_page_non_200_raises_status_error():
    s = DummySession(DummyResp(404))
    with pytest.raises(HTTPStatusError) as ei:
        fetch_page(s, 'https://example.com/missing', ScraperConfig(delay=0))
    assert ei.value.status_code == 404
    assert ei.value.url == 'https://example.com/missing'


def test_fetch_page_non_200_success_status_is_failure():
    # only an exact 200 counts as success
    s = DummySession(DummyResp(204))
    with pytest.raises(HTTPStatusError):
        fetch_page(s, 'https://example.com', ScraperConfig(delay=0))


def test_fetch_page_bad_url_raises_request_error():
    s = DummySession(exc=requests.exceptions.MissingSchema('no scheme'))
    with pytest.raises(RequestError):
        fetch_page(s, 'example.com', ScraperConfig(delay=0))


def test_fetch_page_network_failure_raises_transport_error():
    s = DummySession(exc=requests.exceptions.ConnectionError('refused'))
    with pytest.raises(TransportError) as ei:
        fetch_page(s, 'https://down.example', ScraperConfig(delay=0))
    assert isinstance(ei.value.__cause__, requests.exceptions.ConnectionError)


def test_fetch_page_timeout_raises_transport_error():
    s = DummySession(exc=requests.exceptions.ReadTimeout('slow'))
    with pytest.raises(TransportError):
        fetch_page(s, 'https://slow.example', ScraperConfig(delay=0))


def test_is_url_reachable():
    assert is_url_reachable(DummySession(DummyResp(200)), 'https://a/') is True
    assert is_url_reachable(DummySession(DummyResp(500)), 'https://a/') is False
    assert is_url_reachable(DummySession(exc=requests.exceptions.ConnectionError()), 'https://a/') is False


def test_make_session_sets_user_agent():
    s = make_session('agent-x')
    try:
        assert s.headers['User-Agent'] == 'agent-x'
    finally:
        s.close()


def test_declared_charset_only_when_header_names_one():
    resp = DummyResp(200, headers={'Content-Type': 'text/html'})
    resp.encoding = 'ISO-8859-1'  # requests' default guess for text/*
    assert declared_charset(resp) is None

    resp = DummyResp(200, headers={'Content-Type': 'text/html; charset=windows-1252'})
    resp.encoding = 'windows-1252'
    assert declared_charset(resp) == 'windows-1252'
