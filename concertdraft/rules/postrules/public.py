# /rules/postrules/public.py
# -*- coding: utf-8 -*-
from datetime import date
from typing import Optional

from ...models.concert import ConcertDraft
from .core import apply_announcement_rules


def parse_concert_announcement(text: str, today: Optional[date] = None) -> ConcertDraft:
    """
    1) 줄 분리
    2) 제목/장소/도시/가격 추출
    3) 공연 일시 수집
    4) 마일스톤 분류 → 기간 표기 보조 패스 → 날짜순 정렬
    5) 빈 필드 경고
    어떤 입력이든 예외 없이 초안을 돌려준다. today 는 연도 없는 날짜의 기준 연도용.
    """
    return apply_announcement_rules(text, today=today)
