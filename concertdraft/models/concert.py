# concertdraft/models/concert.py
# 공연 초안 / 저장용 공연 / 마일스톤 데이터 모델
# -*- coding: utf-8 -*-
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MilestoneType(str, Enum):
    FC_LOTTERY_OPEN = "FC_LOTTERY_OPEN"
    FC_LOTTERY_CLOSE = "FC_LOTTERY_CLOSE"
    FC_RESULT = "FC_RESULT"
    OFFICIAL_LOTTERY_OPEN = "OFFICIAL_LOTTERY_OPEN"
    OFFICIAL_LOTTERY_CLOSE = "OFFICIAL_LOTTERY_CLOSE"
    OFFICIAL_RESULT = "OFFICIAL_RESULT"
    GENERAL_SALE_OPEN = "GENERAL_SALE_OPEN"
    PAYMENT_DEADLINE = "PAYMENT_DEADLINE"
    TICKET_ISSUE_OPEN = "TICKET_ISSUE_OPEN"
    SHOW_DOOR_OPEN = "SHOW_DOOR_OPEN"
    SHOW_START = "SHOW_START"


class MilestoneStatus(str, Enum):
    PLANNED = "planned"
    DONE = "done"
    MISSED = "missed"
    CANCELLED = "cancelled"


class ConcertStatus(str, Enum):
    PLANNED = "planned"
    CONFIRMED = "confirmed"
    ATTENDED = "attended"
    CANCELLED = "cancelled"


class SourceType(str, Enum):
    TWEET = "tweet"
    FANCLUB = "fanclub"
    TICKET = "ticket"
    PROMOTER = "promoter"
    NEWS = "news"
    MANUAL = "manual"


MILESTONE_LABELS: Dict[MilestoneType, str] = {
    MilestoneType.FC_LOTTERY_OPEN: "FC 선행 접수 시작",
    MilestoneType.FC_LOTTERY_CLOSE: "FC 선행 접수 마감",
    MilestoneType.FC_RESULT: "FC 당락 발표",
    MilestoneType.OFFICIAL_LOTTERY_OPEN: "오피셜 선행 시작",
    MilestoneType.OFFICIAL_LOTTERY_CLOSE: "오피셜 선행 마감",
    MilestoneType.OFFICIAL_RESULT: "오피셜 당락 발표",
    MilestoneType.GENERAL_SALE_OPEN: "일반 발매",
    MilestoneType.PAYMENT_DEADLINE: "입금 기한",
    MilestoneType.TICKET_ISSUE_OPEN: "발권 시작",
    MilestoneType.SHOW_DOOR_OPEN: "개장",
    MilestoneType.SHOW_START: "개연",
}

# 타임라인 표시 순서
MILESTONE_ORDER: List[MilestoneType] = list(MilestoneType)


class _CamelModel(BaseModel):
    # JSON 은 camelCase, 파이썬 속성은 snake_case
    model_config = ConfigDict(populate_by_name=True)

    def to_json_dict(self) -> Dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ShowTime(_CamelModel):
    date: str                       # YYYY-MM-DD
    time: Optional[str] = None      # HH:MM
    venue: Optional[str] = None
    city: Optional[str] = None


class TicketMilestone(_CamelModel):
    id: str
    type: MilestoneType
    label: str
    date: str                       # YYYY-MM-DD
    time: Optional[str] = None      # HH:MM
    status: MilestoneStatus = MilestoneStatus.PLANNED
    memo: Optional[str] = None


class ConcertDraft(_CamelModel):
    """
    한 번의 파싱 결과. 저장되지 않으며, 사용자가 확인 후 커밋해야 Concert 가 된다.
    """
    title: str = ""
    artist: str = ""
    venue: str = ""
    city: str = ""
    ticket_price: Optional[int] = Field(default=None, alias="ticketPrice")
    show_times: List[ShowTime] = Field(default_factory=list, alias="showTimes")
    milestones: List[TicketMilestone] = Field(default_factory=list)
    raw_text: str = Field(default="", alias="rawText")
    warnings: List[str] = Field(default_factory=list)


class SourceDescriptor(_CamelModel):
    type: SourceType = SourceType.MANUAL
    url: Optional[str] = None


class ConcertSource(_CamelModel):
    id: str
    type: SourceType
    url: Optional[str] = None
    text: Optional[str] = None
    added_at: str = Field(alias="addedAt")          # ISO datetime


class ConcertIn(_CamelModel):
    """커밋 경계의 입력 스키마 (POST)."""
    title: str = Field(min_length=1)
    artist: str = ""
    date: str = Field(min_length=1)
    venue: str = ""
    city: str = ""
    memo: str = ""
    status: ConcertStatus = ConcertStatus.PLANNED
    ticket_price: Optional[float] = Field(default=None, alias="ticketPrice")
    ticket_url: Optional[str] = Field(default=None, alias="ticketUrl")
    show_times: List[ShowTime] = Field(default_factory=list, alias="showTimes")
    milestones: List[TicketMilestone] = Field(default_factory=list)
    sources: List[ConcertSource] = Field(default_factory=list)


class ConcertPatch(_CamelModel):
    """PATCH 스키마: id 외에는 전부 선택. 넘어온 필드만 반영한다."""
    id: str = Field(min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    artist: Optional[str] = None
    date: Optional[str] = Field(default=None, min_length=1)
    venue: Optional[str] = None
    city: Optional[str] = None
    memo: Optional[str] = None
    status: Optional[ConcertStatus] = None
    ticket_price: Optional[float] = Field(default=None, alias="ticketPrice")
    ticket_url: Optional[str] = Field(default=None, alias="ticketUrl")
    show_times: Optional[List[ShowTime]] = Field(default=None, alias="showTimes")
    milestones: Optional[List[TicketMilestone]] = None
    sources: Optional[List[ConcertSource]] = None


class Concert(ConcertIn):
    id: str
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")
    version: int = 1
