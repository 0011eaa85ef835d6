# /rules/postrules/patterns.py
# 정규식/상수 (RE_*, 키워드/우선순위 테이블 등)
# -*- coding: utf-8 -*-
import re
from typing import NamedTuple, Pattern, Tuple

from ...models.concert import MilestoneType

# ── 날짜/시간 ─────────────────────────────────────────────────────────────
RE_DOW = r'(?:\s*[（(](?P<dow>[^()（）\s])[)）])?'

# 2026年3月5日(木) / 2026/3/5 / 2026-03-05 / 2026.3.5
RE_FULL_DATE = re.compile(
    rf'(?P<year>\d{{4}})\s*[年/\-.]\s*(?P<month>\d{{1,2}})\s*[月/\-.]\s*(?P<day>\d{{1,2}})\s*日?{RE_DOW}'
)

# 3/5, 3月5日: 연도 없는 표기. '2026/3/5' 내부의 '3/5' 부분 매치는 배제
RE_SHORT_DATE = re.compile(
    r'(?<![\d/\-.年])(?P<month>\d{1,2})\s*[/月]\s*(?P<day>\d{1,2})'
)

# 00:00 ~ 23:59, 앞뒤가 숫자에 붙은 '123:45' 같은 부분 매치는 배제
RE_TIME = re.compile(r'(?<!\d)(?P<hour>[01]?\d|2[0-3]):(?P<minute>[0-5]\d)(?!\d)')

# 3/1〜3/5, 3月1日(日)～3月5日: 항상 연도 없음
RE_DATE_RANGE = re.compile(
    r'(?<!\d)(?P<m1>\d{1,2})[/.\-月]\s*(?P<d1>\d{1,2})\s*日?(?:\s*[（(][^()（）\s][)）])?'
    r'\s*[~〜～\-]\s*'
    r'(?P<m2>\d{1,2})[/.\-月]\s*(?P<d2>\d{1,2})'
)

# ── 필드 ─────────────────────────────────────────────────────────────────
TITLE_KEYWORDS = re.compile(r'(?:LIVE|TOUR|公演|ワンマン|フェス|CONCERT|ツアー|ライブ)', re.IGNORECASE)

VENUE_PATTERN = re.compile(
    r'.*(?:ホール|アリーナ|ドーム|会館|劇場|シアター|体育館|スタジアム|センター|ライブハウス'
    r'|HALL|ARENA|DOME|THEATER|THEATRE|STADIUM|CENTER|LIVEHOUSE)',
    re.IGNORECASE
)

RE_PRICE = re.compile(r'(?:¥|￥)\s*(?P<yen>[\d,]+)|(?P<grouped>\d{1,3}(?:,\d{3})+)\s*円')

# 공연일 판정용 문맥 키워드 (개장/개연/공연/회장)
SHOW_CONTEXT = re.compile(r'(?:開場|開演|公演|会場)')

# 날짜가 이 개수 이하이면 전부 공연일로 본다 (짧은 플라이어)
SPARSE_DATE_LIMIT = 3

# ── 우선순위 테이블 ───────────────────────────────────────────────────────
class CityRule(NamedTuple):
    priority: int
    name: str


# 텍스트 내 위치가 아니라 priority 로 결정된다 (작을수록 우선)
CITY_RULES: Tuple[CityRule, ...] = tuple(
    CityRule((i + 1) * 10, name) for i, name in enumerate([
        "東京", "大阪", "名古屋", "札幌", "福岡", "仙台", "横浜", "神戸",
        "京都", "広島", "新潟", "千葉", "埼玉", "さいたま", "静岡", "浜松",
        "金沢", "熊本", "那覇", "沖縄", "岡山", "長野", "鹿児島", "高松",
        "松山", "宇都宮", "盛岡", "青森", "長崎",
    ])
)


class MilestoneRule(NamedTuple):
    priority: int
    pattern: Pattern
    type: MilestoneType


MILESTONE_RULES: Tuple[MilestoneRule, ...] = (
    MilestoneRule(10, re.compile(r'(?:FC).*(?:受付|エントリー|申込|抽選)', re.IGNORECASE), MilestoneType.FC_LOTTERY_OPEN),
    MilestoneRule(20, re.compile(r'(?:FC).*(?:締切|終了|応募終了)', re.IGNORECASE), MilestoneType.FC_LOTTERY_CLOSE),
    MilestoneRule(30, re.compile(r'(?:FC).*(?:結果|当落|当選)', re.IGNORECASE), MilestoneType.FC_RESULT),
    MilestoneRule(40, re.compile(r'(?:オフィシャル|先行).*(?:受付|抽選|申込)', re.IGNORECASE), MilestoneType.OFFICIAL_LOTTERY_OPEN),
    MilestoneRule(50, re.compile(r'(?:オフィシャル|先行).*(?:締切|終了)', re.IGNORECASE), MilestoneType.OFFICIAL_LOTTERY_CLOSE),
    MilestoneRule(60, re.compile(r'(?:オフィシャル|先行).*(?:結果|当落|当選)', re.IGNORECASE), MilestoneType.OFFICIAL_RESULT),
    MilestoneRule(70, re.compile(r'(?:一般発売|一般販売|販売開始)', re.IGNORECASE), MilestoneType.GENERAL_SALE_OPEN),
    MilestoneRule(80, re.compile(r'(?:入金|支払|決済).*(?:期限|締切)', re.IGNORECASE), MilestoneType.PAYMENT_DEADLINE),
    MilestoneRule(90, re.compile(r'(?:発券|チケット).*(?:開始|受取|発行)', re.IGNORECASE), MilestoneType.TICKET_ISSUE_OPEN),
    MilestoneRule(100, re.compile(r'(?:開場)'), MilestoneType.SHOW_DOOR_OPEN),
    MilestoneRule(110, re.compile(r'(?:開演)'), MilestoneType.SHOW_START),
)

# 범위 표기의 문맥 판정: FC 가 먼저, 그다음 오피셜/선행
RANGE_FC = re.compile(r'(?:FC)', re.IGNORECASE)
RANGE_OFFICIAL = re.compile(r'(?:オフィシャル|先行)')

RANGE_TYPES = {
    "fc": (MilestoneType.FC_LOTTERY_OPEN, MilestoneType.FC_LOTTERY_CLOSE),
    "official": (MilestoneType.OFFICIAL_LOTTERY_OPEN, MilestoneType.OFFICIAL_LOTTERY_CLOSE),
}

# ── 경고 문구 ────────────────────────────────────────────────────────────
WARN_NO_DATE = '"{type}" 키워드는 감지했지만 날짜를 추출하지 못했습니다.'
WARN_NO_TITLE = "제목을 추출하지 못했습니다."
WARN_NO_VENUE = "장소를 추출하지 못했습니다."
WARN_NO_SHOWTIME = "공연 일시를 추출하지 못했습니다."
WARN_NO_MILESTONE = "티켓 마일스톤을 추출하지 못했습니다."
