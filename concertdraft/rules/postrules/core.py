# /rules/postrules/core.py
# -*- coding: utf-8 -*-
import logging
from datetime import date
from typing import List, Optional

from ...models.concert import ConcertDraft
from ..normalizer import split_lines
from .datetimex import collect_show_times
from .patterns import (
    TITLE_KEYWORDS, WARN_NO_MILESTONE, WARN_NO_SHOWTIME, WARN_NO_TITLE, WARN_NO_VENUE,
)
from .price import extract_price
from .ranges import expand_ranges
from .tickets import classify_milestones
from .venue import extract_city, extract_venue

log = logging.getLogger(__name__)


def extract_title(lines: List[str]) -> str:
    # 투어/라이브 키워드가 있는 첫 줄, 없으면 첫 줄
    for line in lines:
        if TITLE_KEYWORDS.search(line):
            return line
    return lines[0] if lines else ""


def _draft_warnings(draft: ConcertDraft) -> List[str]:
    out = []
    if not draft.title: out.append(WARN_NO_TITLE)
    if not draft.venue: out.append(WARN_NO_VENUE)
    if not draft.show_times: out.append(WARN_NO_SHOWTIME)
    if not draft.milestones: out.append(WARN_NO_MILESTONE)
    return out


def apply_announcement_rules(text: str, today: Optional[date] = None) -> ConcertDraft:
    text = text if isinstance(text, str) else ""
    lines = split_lines(text)
    hint_year = (today or date.today()).year

    # 1) 필드 (서로 독립)
    title = extract_title(lines)
    venue = extract_venue(lines)
    city = extract_city(text)
    price = extract_price(text)

    # 2) 공연 일시
    show_times = collect_show_times(lines)

    # 3) 마일스톤: 분류 → 기간 보조 패스 (점유 타입을 그대로 넘김)
    classified = classify_milestones(lines, hint_year)
    ranged = expand_ranges(text, lines, hint_year, claimed=classified.claimed)
    milestones = sorted(classified.milestones + ranged.milestones, key=lambda ms: ms.date)

    draft = ConcertDraft(
        title=title,
        venue=venue,
        city=city,
        ticket_price=price,
        show_times=show_times,
        milestones=milestones,
        raw_text=text,
        warnings=list(classified.warnings),
    )
    # 4) 빈 필드 경고 (참고용, 실패 아님)
    draft.warnings.extend(_draft_warnings(draft))
    log.debug(
        "parsed announcement: %s lines, %s show times, %s milestones, %s warnings",
        len(lines), len(show_times), len(milestones), len(draft.warnings),
    )
    return draft
