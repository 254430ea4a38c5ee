"""
HTML Fetcher with CloudScraper
Fetches pages over a browser-like session and parses them into Documents
"""

import asyncio
import logging
from concurrent.futures import Executor
from typing import Optional

import cloudscraper
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .document import Document
from .errors import RequestError, StatusCodeError

logger = logging.getLogger(__name__)


class HTMLFetcher:
    """Fetches and parses HTML pages"""

    USER_AGENT = (
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36'
    )

    def __init__(
        self,
        timeout: float = 30,
        max_retries: int = 0,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize HTML Fetcher

        Args:
            timeout: Request timeout in seconds
            max_retries: Retries on connection errors and 429/5xx responses
            session: Pre-built session (a cloudscraper session is created if None)
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = session

        if self.session is None:
            self._create_session()

    def _create_session(self) -> None:
        """Create CloudScraper session with browser headers and retry policy"""
        self.session = cloudscraper.create_scraper(
            browser={
                'browser': 'chrome',
                'platform': 'windows',
                'mobile': False
            }
        )

        self.session.headers.update({
            'User-Agent': self.USER_AGENT,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.9',
        })

        retry_strategy = Retry(
            total=self.max_retries,
            status_forcelist=[429, 500, 502, 503, 504],
            backoff_factor=1,
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def fetch(self, url: str) -> Document:
        """
        Fetch a URL and parse it

        Args:
            url: Target URL

        Returns:
            Document for the final (post-redirect) URL

        Raises:
            RequestError: the request could not complete
            StatusCodeError: the server answered with a non-2xx status
        """
        logger.info(f" Fetching: {url[:80]}..." if len(url) > 80 else f" Fetching: {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug(f" Request failed for {url}: {e}")
            raise RequestError(str(e) or type(e).__name__, url=url) from e

        if not 200 <= response.status_code < 300:
            logger.warning(f" Response: {response.status_code} for {url}")
            raise StatusCodeError(
                f"{response.status_code} - {response.reason or ''}".rstrip(' -'),
                url=url,
                status_code=response.status_code
            )

        logger.debug(f" Success: {response.status_code} ({len(response.text)} bytes)")
        return Document(response.text, response.url or url)

    async def fetch_async(self, url: str, executor: Optional[Executor] = None) -> Document:
        """Run fetch() on an executor thread"""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(executor, self.fetch, url)

    def close(self) -> None:
        """Close the session"""
        if self.session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
