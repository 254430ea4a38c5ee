"""
Queryable HTML document
Thin wrapper over BeautifulSoup that remembers the page URL so URL-valued
attributes (href, src) come back absolute, the way a browser DOM reports them
"""

import logging
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


class Document:
    """A parsed page plus the URL it was served from"""

    # Attributes resolved against the page URL on read
    URL_ATTRIBUTES = ('href', 'src')

    def __init__(self, html: str, url: str, parser: str = 'html.parser'):
        self.url = url
        self.soup = BeautifulSoup(html, parser)

    def query(self, selector: str) -> List[Tag]:
        """All elements matching a CSS selector, in document order"""
        return self.soup.select(selector)

    def query_one(self, selector: str) -> Optional[Tag]:
        """First element matching a CSS selector, or None"""
        return self.soup.select_one(selector)

    def attribute(self, element: Tag, name: str) -> Optional[str]:
        """
        Read an element attribute

        href/src are resolved against the document URL. Returns None when the
        attribute is absent.
        """
        value = element.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            value = ' '.join(value)
        if name in self.URL_ATTRIBUTES:
            return urljoin(self.url, value.strip())
        return value

    @staticmethod
    def text(element: Tag) -> str:
        """Text content of an element, like DOM textContent"""
        return element.get_text()

    def __repr__(self):
        return f"Document(url={self.url!r})"
