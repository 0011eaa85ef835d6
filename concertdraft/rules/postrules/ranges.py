# /rules/postrules/ranges.py
# 'M/D 〜 M/D' 기간 표기 → 선행 접수 시작/마감 쌍 (분류 단계의 보조 패스)
# -*- coding: utf-8 -*-
import logging
from typing import FrozenSet, List, NamedTuple, Optional, Tuple

from ...models.concert import MilestoneType, TicketMilestone
from .datetimex import NearestDate
from .patterns import RANGE_FC, RANGE_OFFICIAL, RANGE_TYPES, RE_DATE_RANGE
from .textutils import _iso_date
from .tickets import make_milestone

log = logging.getLogger(__name__)


class RangeResult(NamedTuple):
    milestones: List[TicketMilestone]
    claimed: FrozenSet[MilestoneType]


def range_types_for(line: str) -> Optional[Tuple[MilestoneType, MilestoneType]]:
    """기간이 들어있는 줄의 문맥으로 (open, close) 타입 결정. FC 가 우선."""
    if RANGE_FC.search(line):
        return RANGE_TYPES["fc"]
    if RANGE_OFFICIAL.search(line):
        return RANGE_TYPES["official"]
    return None


def expand_ranges(
    text: str,
    lines: List[str],
    hint_year: int,
    claimed: FrozenSet[MilestoneType] = frozenset(),
) -> RangeResult:
    """
    줄 단위가 아니라 전체 텍스트에서 기간을 찾는다. 연도는 항상 hint_year.
    분류 패스가 이미 점유한 타입은 건드리지 않는다.
    """
    milestones: List[TicketMilestone] = []
    taken = set(claimed)

    for m in RE_DATE_RANGE.finditer(text or ""):
        context = next((ln for ln in lines if m.group(0) in ln), "")
        types = range_types_for(context)
        if types is None:
            continue
        start = _iso_date(hint_year, m.group('m1'), m.group('d1'))
        end = _iso_date(hint_year, m.group('m2'), m.group('d2'))
        for mtype, iso in zip(types, (start, end)):
            if iso is None or mtype in taken:
                continue
            milestones.append(make_milestone(mtype, NearestDate(iso)))
            taken.add(mtype)

    log.debug("ranges: %s milestones added", len(milestones))
    return RangeResult(milestones, frozenset(taken))
