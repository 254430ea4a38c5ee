"""
Scraper errors and message interception
Typed failures for fetching and extraction, plus the helper that swaps in a
friendlier message before an error reaches the reporter
"""

import logging
from contextlib import contextmanager
from typing import Optional

logger = logging.getLogger(__name__)


class ScraperError(Exception):
    """Base error for the scraping pipeline"""

    # Category tag used by check_error()
    name = "ScraperError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class FetchError(ScraperError):
    """A page could not be retrieved"""

    name = "FetchError"

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class RequestError(FetchError):
    """Network-level failure: connection refused, DNS, timeout, bad URL"""

    name = "RequestError"


class StatusCodeError(FetchError):
    """The server answered with a non-2xx status"""

    name = "StatusCodeError"

    def __init__(self, message: str, url: Optional[str] = None, status_code: int = 0):
        super().__init__(message, url=url)
        self.status_code = status_code


class ExtractionError(ScraperError):
    """A required element or attribute is missing from a page"""

    name = "ExtractionError"


def error_category(err: BaseException) -> str:
    """Category tag of an error (falls back to the class name)"""
    return getattr(err, 'name', None) or type(err).__name__


def check_error(err: BaseException, error_type: str, message: str) -> None:
    """
    Re-raise an error, replacing its message if its category matches

    Args:
        err: The error that was caught
        error_type: Category tag to look for (e.g. 'RequestError')
        message: Message to put on a matching error

    Raises:
        The same error object, always
    """
    if error_category(err) == error_type:
        logger.debug(f" Rewriting {error_type}: {err}")
        if isinstance(err, ScraperError):
            err.message = message
        err.args = (message,)
    raise err


@contextmanager
def intercept(error_type: str, message: str):
    """Context manager form of check_error()"""
    try:
        yield
    except Exception as e:
        check_error(e, error_type, message)
