# tests/test_postrules.py
from datetime import date

from concertdraft.models.concert import MilestoneStatus, MilestoneType
from concertdraft.rules.postrules import parse_concert_announcement
from concertdraft.rules.postrules.patterns import (
    WARN_NO_MILESTONE, WARN_NO_SHOWTIME, WARN_NO_TITLE, WARN_NO_VENUE,
)

TODAY = date(2026, 1, 15)

ANNOUNCE = """\
○○ LIVE TOUR 2026 "BLOOM"
2026年5月10日(日) 開場17:00 / 開演18:00
東京ガーデンシアター
チケット ¥9,800(税込)
FC会員抽選 受付期間：3/1(日)〜3/8(日)
オフィシャル先行 受付 4/1 12:00〜
一般発売 2026/4/25(土) 10:00〜
"""


def _types(draft):
    return [ms.type for ms in draft.milestones]


def test_full_announcement():
    d = parse_concert_announcement(ANNOUNCE, today=TODAY)
    assert d.title == '○○ LIVE TOUR 2026 "BLOOM"'
    assert d.artist == ""
    assert d.venue == "東京ガーデンシアター"
    assert d.city == "東京"
    assert d.ticket_price == 9800
    assert d.raw_text == ANNOUNCE
    assert d.warnings == []

    by_type = {ms.type: ms for ms in d.milestones}
    assert by_type[MilestoneType.FC_LOTTERY_OPEN].date == "2026-03-01"
    # 기간 보조 패스가 마감만 채운다
    assert by_type[MilestoneType.FC_LOTTERY_CLOSE].date == "2026-03-08"
    assert by_type[MilestoneType.OFFICIAL_LOTTERY_OPEN].date == "2026-04-01"
    assert by_type[MilestoneType.OFFICIAL_LOTTERY_OPEN].time == "12:00"
    assert by_type[MilestoneType.GENERAL_SALE_OPEN].date == "2026-04-25"
    assert by_type[MilestoneType.GENERAL_SALE_OPEN].time == "10:00"
    assert by_type[MilestoneType.SHOW_DOOR_OPEN].date == "2026-05-10"
    assert by_type[MilestoneType.SHOW_DOOR_OPEN].time == "17:00"
    assert by_type[MilestoneType.SHOW_START].date == "2026-05-10"
    assert len(d.milestones) == 6
    assert all(ms.status == MilestoneStatus.PLANNED for ms in d.milestones)
    assert all(ms.id.startswith("ms-") for ms in d.milestones)
    assert by_type[MilestoneType.FC_LOTTERY_OPEN].label == "FC 선행 접수 시작"


def test_milestones_sorted_and_unique():
    d = parse_concert_announcement(ANNOUNCE, today=TODAY)
    dates = [ms.date for ms in d.milestones]
    assert dates == sorted(dates)
    assert len(set(_types(d))) == len(d.milestones)


def test_door_open_line():
    d = parse_concert_announcement("2026年3月5日(木) 開場17:00", today=TODAY)
    door = [ms for ms in d.milestones if ms.type == MilestoneType.SHOW_DOOR_OPEN]
    assert len(door) == 1
    assert door[0].date == "2026-03-05"
    assert door[0].time == "17:00"
    assert [(s.date, s.time) for s in d.show_times] == [("2026-03-05", "17:00")]


def test_fc_window_not_duplicated_by_range_pass():
    text = "FC先行(抽選) 受付期間：2026/3/1(日) 12:00〜2026/3/5(木) 23:59"
    d = parse_concert_announcement(text, today=TODAY)
    fc_open = [ms for ms in d.milestones if ms.type == MilestoneType.FC_LOTTERY_OPEN]
    assert len(fc_open) == 1
    assert fc_open[0].date == "2026-03-01"
    assert fc_open[0].time == "12:00"


def test_empty_input():
    d = parse_concert_announcement("", today=TODAY)
    assert d.title == "" and d.venue == "" and d.city == ""
    assert d.ticket_price is None
    assert d.show_times == [] and d.milestones == []
    assert d.raw_text == ""
    assert d.warnings == [WARN_NO_TITLE, WARN_NO_VENUE, WARN_NO_SHOWTIME, WARN_NO_MILESTONE]


def test_whitespace_and_garbage_never_raise():
    for text in ["\n\n   \n", "¥,,, 円", "13/45 99:99 2026/99/99", "FC 抽選\n", "〜〜〜 - / 月"]:
        d = parse_concert_announcement(text, today=TODAY)
        assert d.raw_text == text
        assert WARN_NO_MILESTONE in d.warnings or d.milestones


def test_same_day_idempotence():
    a = parse_concert_announcement(ANNOUNCE, today=TODAY)
    b = parse_concert_announcement(ANNOUNCE, today=TODAY)
    assert (a.title, a.venue, a.city, a.ticket_price) == (b.title, b.venue, b.city, b.ticket_price)
    assert a.show_times == b.show_times
    assert _types(a) == _types(b)


def test_show_times_need_context_when_many_dates():
    text = "\n".join([
        "SUMMER FES 2026",
        "2026/7/1 FC受付開始",
        "2026/7/10 FC受付締切",
        "2026/7/20 入金期限",
        "2026/8/1(土) 公演 18:00",
        "2026/8/2(日) 会場 16:30",
    ])
    d = parse_concert_announcement(text, today=TODAY)
    assert [(s.date, s.time) for s in d.show_times] == [("2026-08-01", "18:00"), ("2026-08-02", "16:30")]
    # 문맥 키워드 없는 줄의 날짜는 공연일이 아니다
    assert "2026-07-01" not in [s.date for s in d.show_times]
    assert _types(d) == [
        MilestoneType.FC_LOTTERY_OPEN,
        MilestoneType.FC_LOTTERY_CLOSE,
        MilestoneType.PAYMENT_DEADLINE,
    ]
    assert WARN_NO_VENUE in d.warnings


def test_sparse_dates_all_become_show_times():
    text = "ワンマンライブ\n2026/9/1 18:00\n2026/9/2 17:30"
    d = parse_concert_announcement(text, today=TODAY)
    assert [(s.date, s.time) for s in d.show_times] == [("2026-09-01", "18:00"), ("2026-09-02", "17:30")]


def test_yearless_dates_use_hint_year():
    d = parse_concert_announcement("一般発売 4/25 10:00", today=date(2031, 6, 1))
    assert d.milestones[0].date == "2031-04-25"


def test_to_json_dict_uses_camel_case():
    out = parse_concert_announcement(ANNOUNCE, today=TODAY).to_json_dict()
    assert out["ticketPrice"] == 9800
    assert out["rawText"] == ANNOUNCE
    assert "showTimes" in out and "milestones" in out
    assert out["milestones"][0]["status"] == "planned"
