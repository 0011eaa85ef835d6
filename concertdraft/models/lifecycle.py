# concertdraft/models/lifecycle.py
# 마일스톤 상태 토글 / 기한 경과 표시 / 다가오는 마일스톤
# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, List, Optional, Union

from .concert import Concert, MilestoneStatus, TicketMilestone

# 사용자 탭 한 번 = 한 칸. 되돌리기가 가능하도록 순환한다.
# missed 는 여기서 절대 만들어지지 않는다 (표시 전용 계산값).
NEXT_STATUS: Dict[MilestoneStatus, MilestoneStatus] = {
    MilestoneStatus.PLANNED: MilestoneStatus.DONE,
    MilestoneStatus.DONE: MilestoneStatus.PLANNED,
    MilestoneStatus.MISSED: MilestoneStatus.DONE,
    MilestoneStatus.CANCELLED: MilestoneStatus.PLANNED,
}


def _iso(day: Optional[Union[date, str]]) -> str:
    if day is None:
        return date.today().isoformat()
    return day if isinstance(day, str) else day.isoformat()


def next_status(status: Union[MilestoneStatus, str]) -> MilestoneStatus:
    return NEXT_STATUS[MilestoneStatus(status)]


def toggle_milestone(milestone: TicketMilestone) -> TicketMilestone:
    return milestone.model_copy(update={"status": next_status(milestone.status)})


def is_overdue(milestone: TicketMilestone, today: Optional[Union[date, str]] = None) -> bool:
    # ISO 날짜라 문자열 비교로 충분
    return milestone.date < _iso(today) and milestone.status == MilestoneStatus.PLANNED


def display_status(milestone: TicketMilestone, today: Optional[Union[date, str]] = None) -> MilestoneStatus:
    """화면용 상태. 저장값은 planned 그대로 두고 여기서만 missed 로 보인다."""
    if is_overdue(milestone, today):
        return MilestoneStatus.MISSED
    return milestone.status


def apply_milestone_toggle(concert: Concert, milestone_id: str) -> Dict[str, List[Dict]]:
    """해당 마일스톤만 다음 상태로 바꾼 PATCH 페이로드. 없는 id 면 KeyError."""
    if not any(ms.id == milestone_id for ms in concert.milestones):
        raise KeyError(milestone_id)
    updated = [
        toggle_milestone(ms) if ms.id == milestone_id else ms
        for ms in concert.milestones
    ]
    return {"milestones": [ms.to_json_dict() for ms in updated]}


def upcoming_milestones(
    concerts: List[Concert],
    days: int = 7,
    today: Optional[date] = None,
) -> List[Dict]:
    """
    오늘부터 days 일 이내의 planned 마일스톤 (모든 공연 통틀어 날짜순).
    각 항목에 concertId / concertTitle 을 붙인다.
    """
    start = today or date.today()
    lo, hi = start.isoformat(), (start + timedelta(days=days)).isoformat()
    out = []
    for concert in concerts:
        for ms in concert.milestones:
            if ms.status != MilestoneStatus.PLANNED:
                continue
            if lo <= ms.date <= hi:
                item = ms.to_json_dict()
                item["concertId"] = concert.id
                item["concertTitle"] = concert.title
                out.append(item)
    return sorted(out, key=lambda x: x["date"])


def next_milestone(concert: Concert, today: Optional[date] = None) -> Optional[TicketMilestone]:
    lo = _iso(today)
    pending = [ms for ms in concert.milestones if ms.status == MilestoneStatus.PLANNED and ms.date >= lo]
    return min(pending, key=lambda ms: ms.date) if pending else None
