# concertdraft/inference/importer.py
# 텍스트 또는 URL → 초안(+출처), 초안 → 커밋용 공연 입력
from __future__ import annotations

import logging
from datetime import date
from typing import NamedTuple, Optional

from concertdraft.core.config import Settings
from concertdraft.data.store import utc_now_iso
from concertdraft.inference.fetch import fetch_source_text
from concertdraft.models.concert import (
    ConcertDraft, ConcertIn, ConcertSource, ConcertStatus, SourceDescriptor, SourceType,
)
from concertdraft.rules.postrules import parse_concert_announcement
from concertdraft.rules.postrules.textutils import gen_id

log = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "텍스트 또는 URL을 입력해주세요"
UNTITLED = "제목 없음"


class EmptyInputError(Exception):
    def __init__(self, message: str = EMPTY_INPUT_MESSAGE):
        super().__init__(message)
        self.message = message


class ImportResult(NamedTuple):
    draft: ConcertDraft
    source: SourceDescriptor


def import_announcement(
    url: Optional[str] = None,
    text: Optional[str] = None,
    cfg: Optional[Settings] = None,
    today: Optional[date] = None,
) -> ImportResult:
    """
    텍스트가 있으면 그대로(manual), 없으면 URL 을 가져와 파싱.
    URL 실패는 SourceFetchError 로 그대로 올라간다.
    """
    if text:
        raw, source = text, SourceDescriptor(type=SourceType.MANUAL)
    elif url:
        fetched = fetch_source_text(url, cfg)
        raw, source = fetched.text, SourceDescriptor(type=fetched.type, url=url)
    else:
        raw, source = "", None

    if not raw:
        raise EmptyInputError()

    draft = parse_concert_announcement(raw, today=today)
    log.info("imported %s source: %s milestones, %s warnings",
             source.type.value, len(draft.milestones), len(draft.warnings))
    return ImportResult(draft, source)


def concert_from_draft(
    draft: ConcertDraft,
    source: Optional[SourceDescriptor] = None,
    text: Optional[str] = None,
    today: Optional[date] = None,
    **edits,
) -> ConcertIn:
    """
    검토 화면에서 '저장' 할 때의 본문. edits 로 title/artist/venue/city 수정값을 받는다.
    대표 날짜는 첫 공연일(없으면 오늘).
    """
    title = (edits.get("title", draft.title) or "").strip() or UNTITLED
    primary = draft.show_times[0].date if draft.show_times else (today or date.today()).isoformat()
    sources = []
    if source is not None:
        sources.append(ConcertSource(
            id=gen_id("src"),
            type=source.type,
            url=source.url,
            text=text,
            added_at=utc_now_iso(),
        ))
    return ConcertIn(
        title=title,
        artist=(edits.get("artist", draft.artist) or "").strip(),
        date=primary,
        venue=(edits.get("venue", draft.venue) or "").strip(),
        city=(edits.get("city", draft.city) or "").strip(),
        memo="",
        status=ConcertStatus.PLANNED,
        ticket_price=draft.ticket_price,
        show_times=draft.show_times,
        milestones=draft.milestones,
        sources=sources,
    )
