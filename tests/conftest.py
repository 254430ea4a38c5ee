import logging

import pytest
import requests

BASE = 'http://shop.test'
LISTING_URL = f'{BASE}/shirts.php'

LISTING_HTML = """
<html><body>
  <ul class="products">
    <li><a href="shirt.php?id=101"><img src="img/shirts/shirt-101.jpg"><p>View Details</p></a></li>
    <li><a href="shirt.php?id=102"><img src="img/shirts/shirt-102.jpg"><p>View Details</p></a></li>
    <li><a href="/shirt.php?id=103"><img src="img/shirts/shirt-103.jpg"><p>View Details</p></a></li>
  </ul>
  <a href="contact.php">Contact</a>
</body></html>
"""

SHIRTS = {
    101: ('$18', 'Logo Shirt, Red'),
    102: ('$20', "Men's Shirt"),
    103: ('$25', 'Mike the Frog Shirt, "Black"'),
}


def detail_html(shirt_id: int) -> str:
    price, name = SHIRTS[shirt_id]
    return f"""
    <html><body>
      <div class="shirt-picture">
        <span><img src="img/shirts/shirt-{shirt_id}.jpg" alt="shirt-{shirt_id}"></span>
      </div>
      <div class="shirt-details">
        <h1><span class="price">{price}</span> {name}</h1>
      </div>
    </body></html>
    """


def detail_url(shirt_id: int) -> str:
    return f'{BASE}/shirt.php?id={shirt_id}'


class FakeResponse:
    def __init__(self, url, text='', status_code=200, reason='OK'):
        self.url = url
        self.text = text
        self.status_code = status_code
        self.reason = reason


class FakeSession:
    """
    Stands in for the cloudscraper session

    pages maps URL -> HTML string, an int status code, or an exception to raise.
    """

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.headers = {}
        self.requested = []
        self.closed = False

    def mount(self, prefix, adapter):
        pass

    def get(self, url, timeout=None):
        self.requested.append(url)
        page = self.pages.get(url)
        if page is None:
            raise requests.ConnectionError(f"Max retries exceeded with url: {url}")
        if isinstance(page, BaseException):
            raise page
        if isinstance(page, int):
            return FakeResponse(url, '', status_code=page, reason='Not Found')
        return FakeResponse(url, page)

    def close(self):
        self.closed = True


@pytest.fixture
def site_pages():
    pages = {LISTING_URL: LISTING_HTML}
    for shirt_id in SHIRTS:
        pages[detail_url(shirt_id)] = detail_html(shirt_id)
    return pages


@pytest.fixture
def fake_session(site_pages):
    return FakeSession(site_pages)


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
