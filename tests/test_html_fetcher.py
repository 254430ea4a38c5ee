import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest
import requests

from product_scraper.core.errors import RequestError, StatusCodeError
from product_scraper.core.html_fetcher import HTMLFetcher

from .conftest import BASE, LISTING_URL, FakeResponse, FakeSession, detail_url


def test_fetch_returns_parsed_document(fake_session):
    fetcher = HTMLFetcher(session=fake_session)

    doc = fetcher.fetch(LISTING_URL)

    assert doc.url == LISTING_URL
    assert len(doc.query('.products a')) == 3
    assert fake_session.requested == [LISTING_URL]


def test_fetch_uses_final_url_after_redirect():
    class RedirectingSession(FakeSession):
        def get(self, url, timeout=None):
            return FakeResponse(f'{BASE}/moved/index.php', '<a href="x.php">x</a>')

    doc = HTMLFetcher(session=RedirectingSession()).fetch(LISTING_URL)

    assert doc.url == f'{BASE}/moved/index.php'
    assert doc.attribute(doc.query_one('a'), 'href') == f'{BASE}/moved/x.php'


def test_connection_failure_raises_request_error():
    fetcher = HTMLFetcher(session=FakeSession())

    with pytest.raises(RequestError) as exc_info:
        fetcher.fetch('http://unreachable.test/')

    assert exc_info.value.url == 'http://unreachable.test/'
    assert 'Max retries exceeded' in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_timeout_raises_request_error():
    session = FakeSession({LISTING_URL: requests.Timeout('Read timed out.')})

    with pytest.raises(RequestError, match='Read timed out'):
        HTMLFetcher(session=session).fetch(LISTING_URL)


def test_invalid_url_raises_request_error():
    session = FakeSession({'': requests.exceptions.MissingSchema("Invalid URL ''")})

    with pytest.raises(RequestError, match='Invalid URL'):
        HTMLFetcher(session=session).fetch('')


def test_non_2xx_raises_status_code_error():
    session = FakeSession({detail_url(999): 404})

    with pytest.raises(StatusCodeError) as exc_info:
        HTMLFetcher(session=session).fetch(detail_url(999))

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == '404 - Not Found'


def test_fetch_async(fake_session):
    fetcher = HTMLFetcher(session=fake_session)

    doc = asyncio.run(fetcher.fetch_async(detail_url(101)))

    assert doc.query_one('.price').get_text() == '$18'


def test_default_session_is_cloudscraper(monkeypatch):
    created = FakeSession()
    monkeypatch.setattr(
        'product_scraper.core.html_fetcher.cloudscraper.create_scraper',
        lambda **kwargs: created
    )

    fetcher = HTMLFetcher(timeout=5, max_retries=2)

    assert fetcher.session is created
    assert 'User-Agent' in created.headers


def test_context_manager_closes_session(fake_session):
    with HTMLFetcher(session=fake_session):
        pass

    assert fake_session.closed


def test_fetch_from_many_threads(fake_session):
    fetcher = HTMLFetcher(session=fake_session)
    urls = [detail_url(101), detail_url(102), detail_url(103)] * 5

    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        docs = list(pool.map(fetcher.fetch, urls))

    assert [d.url for d in docs] == urls
    assert len(fake_session.requested) == len(urls)
