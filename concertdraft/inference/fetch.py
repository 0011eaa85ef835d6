# concertdraft/inference/fetch.py
# URL → 평문 텍스트 (트윗은 oEmbed, 그 외는 본문 HTML 정리)
from __future__ import annotations

import logging
import re
from typing import NamedTuple, Optional

import requests
from bs4 import BeautifulSoup

from concertdraft.core.config import Settings, settings as default_settings
from concertdraft.models.concert import SourceType

log = logging.getLogger(__name__)

OEMBED_URL = "https://publish.twitter.com/oembed"
FETCH_ERROR_MESSAGE = "URL을 불러올 수 없습니다. 텍스트 붙여넣기를 사용해주세요."

_TWEET_URL = re.compile(r"https?://(?:www\.)?(?:twitter\.com|x\.com)/", re.IGNORECASE)


class SourceFetchError(Exception):
    """URL 접근 실패/타임아웃. 파서 경고와는 별개의 사용자용 오류."""

    def __init__(self, message: str = FETCH_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class FetchedSource(NamedTuple):
    text: str
    type: SourceType


def is_tweet_url(url: str) -> bool:
    return bool(_TWEET_URL.match(url or ""))


def oembed_html_to_text(html: str) -> str:
    # 트윗 임베드는 한 덩어리 텍스트로
    text = BeautifulSoup(html or "", "lxml").get_text(separator=" ")
    return re.sub(r"\s+", " ", text).strip()


def page_html_to_text(html: str) -> str:
    soup = BeautifulSoup(html or "", "lxml")
    for el in soup(["script", "style"]):
        el.decompose()
    root = soup.body or soup
    text = root.get_text(separator="\n")
    text = "\n".join(ln.strip() for ln in text.splitlines())
    return re.sub(r"\n{3,}", "\n\n", text).strip()


def _fetch_tweet_text(session: requests.Session, url: str, cfg: Settings) -> str:
    r = session.get(
        OEMBED_URL,
        params={"url": url, "omit_script": "true"},
        timeout=cfg.oembed_timeout,
    )
    if not r.ok:
        log.info("oEmbed %s for %s, falling back to page fetch", r.status_code, url)
        return ""
    return oembed_html_to_text(r.json().get("html", ""))


def fetch_source_text(url: str, cfg: Optional[Settings] = None) -> FetchedSource:
    cfg = cfg or default_settings
    session = requests.Session()
    session.headers.update({"User-Agent": cfg.user_agent})

    try:
        if is_tweet_url(url):
            text = _fetch_tweet_text(session, url, cfg)
            if text:
                return FetchedSource(text, SourceType.TWEET)

        source_type = SourceType.TWEET if is_tweet_url(url) else SourceType.NEWS
        r = session.get(url, timeout=cfg.fetch_timeout)
        if not r.ok:
            log.warning("fetch %s: HTTP %s", url, r.status_code)
            return FetchedSource("", source_type)
        return FetchedSource(page_html_to_text(r.text), source_type)
    except (requests.RequestException, ValueError) as exc:
        log.warning("fetch %s failed: %s", url, exc)
        raise SourceFetchError() from exc
