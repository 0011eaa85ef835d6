# tests/test_fetch.py
from datetime import date

import pytest
import requests
import responses as rsps

from concertdraft.inference.fetch import (
    OEMBED_URL, SourceFetchError, fetch_source_text, is_tweet_url, page_html_to_text,
)
from concertdraft.inference.importer import EmptyInputError, import_announcement
from concertdraft.models.concert import SourceType

TWEET = "https://x.com/artist/status/123"
NEWS = "https://news.example.jp/articles/1"

PAGE = """<html><head><style>p{color:red}</style></head>
<body><script>var a = 1;</script>
<h1>ワンマンLIVE 2026</h1>
<p>一般発売 4/25 10:00</p>
</body></html>"""


def test_is_tweet_url():
    assert is_tweet_url(TWEET)
    assert is_tweet_url("https://twitter.com/a/status/1")
    assert not is_tweet_url(NEWS)
    assert not is_tweet_url("")


def test_page_html_to_text_drops_scripts():
    text = page_html_to_text(PAGE)
    assert "var a" not in text
    assert "color" not in text
    assert "ワンマンLIVE 2026" in text.splitlines()
    assert "一般発売 4/25 10:00" in text.splitlines()


@rsps.activate
def test_tweet_via_oembed():
    rsps.add(rsps.GET, OEMBED_URL, json={"html": "<blockquote><p>FC先行 3/1〜3/5</p>- artist</blockquote>"})
    got = fetch_source_text(TWEET)
    assert got.type == SourceType.TWEET
    assert got.text.startswith("FC先行 3/1〜3/5")


@rsps.activate
def test_tweet_falls_back_to_page():
    rsps.add(rsps.GET, OEMBED_URL, status=404)
    rsps.add(rsps.GET, TWEET, body="<html><body><p>開演 18:00</p></body></html>")
    got = fetch_source_text(TWEET)
    assert got.type == SourceType.TWEET
    assert got.text == "開演 18:00"


@rsps.activate
def test_news_page():
    rsps.add(rsps.GET, NEWS, body=PAGE)
    got = fetch_source_text(NEWS)
    assert got.type == SourceType.NEWS
    assert "一般発売" in got.text


@rsps.activate
def test_connection_error_becomes_fetch_error():
    rsps.add(rsps.GET, NEWS, body=requests.ConnectionError("boom"))
    with pytest.raises(SourceFetchError) as ei:
        fetch_source_text(NEWS)
    assert "텍스트 붙여넣기" in ei.value.message


@rsps.activate
def test_http_error_page_is_empty_input():
    rsps.add(rsps.GET, NEWS, status=500)
    with pytest.raises(EmptyInputError):
        import_announcement(url=NEWS)


def test_import_manual_text():
    res = import_announcement(text="一般発売 4/25", today=date(2026, 1, 1))
    assert res.source.type == SourceType.MANUAL
    assert res.source.url is None
    assert res.draft.milestones[0].date == "2026-04-25"


def test_import_requires_input():
    with pytest.raises(EmptyInputError):
        import_announcement()
    with pytest.raises(EmptyInputError):
        import_announcement(url="", text="")
