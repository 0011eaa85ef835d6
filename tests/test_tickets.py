# tests/test_tickets.py
from concertdraft.models.concert import MilestoneType
from concertdraft.rules.postrules.patterns import MILESTONE_RULES, WARN_NO_DATE
from concertdraft.rules.postrules.ranges import expand_ranges, range_types_for
from concertdraft.rules.postrules.tickets import classify_milestones, matching_rules


def test_rule_table_has_explicit_unique_priorities():
    prios = [r.priority for r in MILESTONE_RULES]
    assert prios == sorted(prios)
    assert len(set(prios)) == len(prios)
    assert {r.type for r in MILESTONE_RULES} == set(MilestoneType)


def test_each_rule_matches_its_keyword():
    samples = {
        MilestoneType.FC_LOTTERY_OPEN: "FC 抽選受付",
        MilestoneType.FC_LOTTERY_CLOSE: "FC 応募終了",
        MilestoneType.FC_RESULT: "FC 当落発表",
        MilestoneType.OFFICIAL_LOTTERY_OPEN: "オフィシャル 申込",
        MilestoneType.OFFICIAL_LOTTERY_CLOSE: "オフィシャル 締切",
        MilestoneType.OFFICIAL_RESULT: "オフィシャル 結果",
        MilestoneType.GENERAL_SALE_OPEN: "一般発売",
        MilestoneType.PAYMENT_DEADLINE: "入金期限",
        MilestoneType.TICKET_ISSUE_OPEN: "発券開始",
        MilestoneType.SHOW_DOOR_OPEN: "開場",
        MilestoneType.SHOW_START: "開演",
    }
    for mtype, line in samples.items():
        assert mtype in [r.type for r in matching_rules(line)], line


def test_priority_regression_fc_presale_line():
    # 'FC先行' 줄은 FC 규칙이 먼저, 그 다음 '先行' 때문에 오피셜 규칙도 걸린다
    types = [r.type for r in matching_rules("FC先行(抽選) 受付")]
    assert types == [MilestoneType.FC_LOTTERY_OPEN, MilestoneType.OFFICIAL_LOTTERY_OPEN]


def test_first_line_wins_per_type():
    lines = ["一般発売 4/25", "一般発売 5/1"]
    res = classify_milestones(lines, 2026)
    assert [(m.type, m.date) for m in res.milestones] == [(MilestoneType.GENERAL_SALE_OPEN, "2026-04-25")]
    assert res.claimed == frozenset({MilestoneType.GENERAL_SALE_OPEN})


def test_lookahead_one_line_only():
    res = classify_milestones(["一般発売", "4/25(土) 10:00〜"], 2026)
    assert [(m.date, m.time) for m in res.milestones] == [("2026-04-25", "10:00")]

    res = classify_milestones(["一般発売", "詳細は後日", "4/25"], 2026)
    assert res.milestones == []
    assert res.warnings == [WARN_NO_DATE.format(type="GENERAL_SALE_OPEN")]


def test_missing_date_warns_and_continues():
    res = classify_milestones(["開場 2026/6/1 17:00", "入金期限 未定"], 2026)
    assert [m.type for m in res.milestones] == [MilestoneType.SHOW_DOOR_OPEN]
    assert WARN_NO_DATE.format(type="PAYMENT_DEADLINE") in res.warnings


def test_claimed_types_are_respected():
    res = classify_milestones(["開場 2026/6/1"], 2026, claimed=frozenset({MilestoneType.SHOW_DOOR_OPEN}))
    assert res.milestones == []
    assert res.warnings == []


def test_range_types_for_context():
    assert range_types_for("FC先行 3/1〜3/5") == (MilestoneType.FC_LOTTERY_OPEN, MilestoneType.FC_LOTTERY_CLOSE)
    assert range_types_for("オフィシャル先行 3/1〜3/5") == (
        MilestoneType.OFFICIAL_LOTTERY_OPEN, MilestoneType.OFFICIAL_LOTTERY_CLOSE)
    assert range_types_for("グッズ販売 3/1〜3/5") is None


def test_expand_ranges_fills_both_sides():
    text = "オフィシャル先行 3/10〜3/15"
    res = expand_ranges(text, [text], 2026)
    assert [(m.type, m.date, m.time) for m in res.milestones] == [
        (MilestoneType.OFFICIAL_LOTTERY_OPEN, "2026-03-10", None),
        (MilestoneType.OFFICIAL_LOTTERY_CLOSE, "2026-03-15", None),
    ]
    assert res.claimed == frozenset({MilestoneType.OFFICIAL_LOTTERY_OPEN, MilestoneType.OFFICIAL_LOTTERY_CLOSE})


def test_expand_ranges_only_fills_unclaimed():
    text = "FC受付 3月1日(日)～3月5日"
    claimed = frozenset({MilestoneType.FC_LOTTERY_OPEN})
    res = expand_ranges(text, [text], 2026, claimed=claimed)
    assert [(m.type, m.date) for m in res.milestones] == [(MilestoneType.FC_LOTTERY_CLOSE, "2026-03-05")]
    assert claimed == frozenset({MilestoneType.FC_LOTTERY_OPEN})


def test_expand_ranges_without_context_is_ignored():
    text = "物販 3/1-3/5"
    assert expand_ranges(text, [text], 2026).milestones == []
