# /rules/postrules/datetimex.py
# -*- coding: utf-8 -*-
import re
from typing import Iterator, List, NamedTuple, Optional

from ...models.concert import ShowTime
from .patterns import RE_FULL_DATE, RE_SHORT_DATE, RE_TIME, SHOW_CONTEXT, SPARSE_DATE_LIMIT
from .textutils import _iso_date, _pad


class NearestDate(NamedTuple):
    date: str
    time: Optional[str] = None


class DatedLine(NamedTuple):
    date: str
    time: Optional[str]
    line: str


def _find_time(text: str, start: int = 0) -> Optional[str]:
    m = RE_TIME.search(text, start)
    if not m:
        return None
    return f"{_pad(m.group('hour'))}:{m.group('minute')}"


def _iter_full_dates(text: str) -> Iterator[re.Match]:
    # 달력상 유효한 매치만 (2026/13/40 같은 잡음 제거)
    for m in RE_FULL_DATE.finditer(text):
        if _iso_date(m.group('year'), m.group('month'), m.group('day')):
            yield m


def parse_full_date(text: str) -> Optional[str]:
    for m in _iter_full_dates(text):
        return _iso_date(m.group('year'), m.group('month'), m.group('day'))
    return None


def parse_short_date(text: str, hint_year: int) -> Optional[str]:
    for m in RE_SHORT_DATE.finditer(text):
        iso = _iso_date(hint_year, m.group('month'), m.group('day'))
        if iso:
            return iso
    return None


def extract_nearest_date(text: str, hint_year: int) -> Optional[NearestDate]:
    """
    한 줄(또는 다음 한 줄)에서 날짜 하나를 뽑는다.
      - 연도 포함 날짜가 있으면 그것을 우선
      - 없으면 연도 없는 'M/D', 'M月D' 에 hint_year 를 붙임
      - 시간은 같은 텍스트 안의 첫 HH:MM
    """
    iso = parse_full_date(text) or parse_short_date(text, hint_year)
    if iso is None:
        return None
    return NearestDate(iso, _find_time(text))


def collect_full_dates(lines: List[str]) -> List[DatedLine]:
    out = []
    for line in lines:
        for m in _iter_full_dates(line):
            iso = _iso_date(m.group('year'), m.group('month'), m.group('day'))
            # 시간은 날짜 위치 이후에서 찾는다
            out.append(DatedLine(iso, _find_time(line, m.start()), line))
    return out


def collect_show_times(lines: List[str]) -> List[ShowTime]:
    dated = collect_full_dates(lines)
    sparse = len(dated) <= SPARSE_DATE_LIMIT
    return [
        ShowTime(date=d.date, time=d.time)
        for d in dated
        if sparse or SHOW_CONTEXT.search(d.line)
    ]
