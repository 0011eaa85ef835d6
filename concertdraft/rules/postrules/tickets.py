# /rules/postrules/tickets.py
# 티켓 마일스톤 분류 (줄 단위 키워드 → 타입)
# -*- coding: utf-8 -*-
import logging
from typing import FrozenSet, List, NamedTuple, Optional, Sequence

from ...models.concert import MILESTONE_LABELS, MilestoneType, TicketMilestone
from .datetimex import NearestDate, extract_nearest_date
from .patterns import MILESTONE_RULES, WARN_NO_DATE, MilestoneRule
from .textutils import gen_id

log = logging.getLogger(__name__)


class ClassifierResult(NamedTuple):
    milestones: List[TicketMilestone]
    claimed: FrozenSet[MilestoneType]
    warnings: List[str]


def make_milestone(mtype: MilestoneType, found: NearestDate) -> TicketMilestone:
    return TicketMilestone(
        id=gen_id("ms"),
        type=mtype,
        label=MILESTONE_LABELS[mtype],
        date=found.date,
        time=found.time,
    )


def _date_near(lines: List[str], idx: int, hint_year: int) -> Optional[NearestDate]:
    # 같은 줄 → 바로 다음 한 줄까지만
    found = extract_nearest_date(lines[idx], hint_year)
    if found is None and idx + 1 < len(lines):
        found = extract_nearest_date(lines[idx + 1], hint_year)
    return found


def matching_rules(line: str, rules: Sequence[MilestoneRule] = MILESTONE_RULES) -> List[MilestoneRule]:
    """이 줄에 걸리는 규칙들 (priority 오름차순)."""
    return [r for r in sorted(rules, key=lambda r: r.priority) if r.pattern.search(line)]


def classify_milestones(
    lines: List[str],
    hint_year: int,
    claimed: FrozenSet[MilestoneType] = frozenset(),
    rules: Sequence[MilestoneRule] = MILESTONE_RULES,
) -> ClassifierResult:
    """
    각 줄에서 규칙을 priority 순으로 보고, 아직 점유되지 않은 타입이면
    같은 줄/다음 줄에서 날짜를 찾는다.
      - 성공: 마일스톤 생성 + 타입 점유
      - 실패: 경고만 남기고 계속 (중단하지 않음)
    한 줄에서 여러 타입이 나올 수 있다.
    """
    milestones: List[TicketMilestone] = []
    warnings: List[str] = []
    taken = set(claimed)

    for idx, line in enumerate(lines):
        for rule in matching_rules(line, rules):
            if rule.type in taken:
                continue
            found = _date_near(lines, idx, hint_year)
            if found is None:
                warnings.append(WARN_NO_DATE.format(type=rule.type.value))
                continue
            milestones.append(make_milestone(rule.type, found))
            taken.add(rule.type)

    log.debug("classifier: %s milestones, %s warnings", len(milestones), len(warnings))
    return ClassifierResult(milestones, frozenset(taken), warnings)
