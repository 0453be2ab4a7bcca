from datetime import datetime, timezone

import pytest
import requests

from ph_news.images import FallbackCounter


NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Maps URL → bytes body, FakeResponse, or an exception to raise."""

    def __init__(self, routes):
        self.routes = dict(routes)
        self.calls = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.closed = True

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        result = self.routes.get(url)
        if result is None:
            raise requests.exceptions.ConnectionError(f"no route to {url}")
        if isinstance(result, Exception):
            raise result
        if isinstance(result, FakeResponse):
            return result
        return FakeResponse(result)


def rss(channel_title, items):
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:content="http://purl.org/rss/1.0/modules/content/"
     xmlns:dc="http://purl.org/dc/elements/1.1/"
     xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <title>{channel_title}</title>
    <link>http://example.com/</link>
    <description>Test feed</description>
    {items}
  </channel>
</rss>
""".encode("utf-8")


def rss_item(title, link, pub_date, guid=None, extra=""):
    guid_xml = f'<guid isPermaLink="false">{guid}</guid>' if guid else ""
    return f"""
    <item>
      <title>{title}</title>
      <link>{link}</link>
      <pubDate>{pub_date}</pubDate>
      {guid_xml}
      {extra}
    </item>"""


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def counter():
    return FallbackCounter()
