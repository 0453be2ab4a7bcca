import pytest
import requests

from ph_news.exceptions import FeedFetchError
from ph_news.fetcher import USER_AGENT, build_session, fetch_all, fetch_feed
from ph_news.models import Source

from conftest import FakeResponse, FakeSession, rss, rss_item


GOOD = Source("PTV", "https://feeds.example.com/ptv")
ATOM = Source("PIA", "https://feeds.example.com/pia")
DOWN = Source("DOLE", "https://feeds.example.com/dole")

ATOM_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>PIA World</title>
  <id>urn:pia</id>
  <updated>2024-05-31T10:00:00Z</updated>
  <entry>
    <title>Atom Item</title>
    <link href="https://pia.example.com/1" rel="alternate"/>
    <id>urn:pia:1</id>
    <updated>2024-05-31T10:00:00Z</updated>
    <summary>Short summary</summary>
    <author><name>Jane Cruz</name></author>
  </entry>
</feed>
"""


def test_fetch_feed_parses_rss():
    body = rss("PTV News", rss_item("Hello", "https://ptv.example.com/1", "Fri, 31 May 2024 10:00:00 GMT", guid="p1"))
    session = FakeSession({GOOD.url: body})

    feed = fetch_feed(GOOD, timeout=10, session=session)

    assert feed.title == "PTV News"
    assert len(feed.entries) == 1
    assert feed.entries[0]["title"] == "Hello"
    assert session.calls == [(GOOD.url, 10)]


def test_fetch_feed_parses_atom():
    feed = fetch_feed(ATOM, session=FakeSession({ATOM.url: ATOM_XML}))
    assert feed.title == "PIA World"
    assert feed.entries[0]["author"] == "Jane Cruz"
    assert feed.entries[0]["link"] == "https://pia.example.com/1"


@pytest.mark.parametrize(
    "result",
    [
        requests.exceptions.Timeout("timed out"),
        requests.exceptions.ConnectionError("refused"),
        FakeResponse(b"", status_code=503),
    ],
)
def test_fetch_feed_raises_domain_error(result):
    with pytest.raises(FeedFetchError):
        fetch_feed(DOWN, session=FakeSession({DOWN.url: result}))


def test_fetch_feed_rejects_malformed_document():
    with pytest.raises(FeedFetchError):
        fetch_feed(DOWN, session=FakeSession({DOWN.url: b"not a feed at all"}))


def test_fetch_all_skips_failures_and_keeps_order(caplog):
    body = rss("PTV News", rss_item("Hello", "https://ptv.example.com/1", "Fri, 31 May 2024 10:00:00 GMT"))
    session = FakeSession({GOOD.url: body, ATOM.url: ATOM_XML})

    with caplog.at_level("WARNING", logger="ph_news.fetcher"):
        results = list(fetch_all([DOWN, GOOD, ATOM], session=session))

    assert [s.label for s, _ in results] == ["PTV", "PIA"]
    assert "DOLE" in caplog.text


def test_fetch_all_with_every_source_down():
    assert list(fetch_all([DOWN, GOOD], session=FakeSession({}))) == []


def test_build_session_sets_user_agent():
    assert build_session().headers["User-Agent"] == USER_AGENT


def test_parser_crash_is_a_source_failure(monkeypatch):
    import ph_news.fetcher as fetcher

    def explode(content):
        raise RuntimeError("parser bug")

    monkeypatch.setattr(fetcher.feedparser, "parse", explode)
    session = FakeSession({DOWN.url: b"<rss/>", GOOD.url: b"<rss/>"})

    with pytest.raises(FeedFetchError):
        fetch_feed(DOWN, session=session)
    assert list(fetch_all([DOWN, GOOD], session=session)) == []


def test_owned_session_is_closed(monkeypatch):
    import ph_news.fetcher as fetcher

    session = FakeSession({ATOM.url: ATOM_XML})
    monkeypatch.setattr(fetcher, "build_session", lambda: session)

    results = list(fetch_all([ATOM, DOWN]))

    assert [s.label for s, _ in results] == ["PIA"]
    assert session.closed


def test_injected_session_is_left_open():
    session = FakeSession({ATOM.url: ATOM_XML})
    list(fetch_all([ATOM], session=session))
    fetch_feed(ATOM, session=session)
    assert not session.closed
