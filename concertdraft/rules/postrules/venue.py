# /rules/postrules/venue.py
# 공연장 / 도시 추출
# -*- coding: utf-8 -*-
from typing import List, Sequence

from .patterns import CITY_RULES, VENUE_PATTERN, CityRule


def extract_venue(lines: List[str]) -> str:
    # 첫 번째로 걸리는 줄의 매치 전체(줄 머리 ~ 마지막 접미어)
    for line in lines:
        m = VENUE_PATTERN.match(line)
        if m:
            return m.group(0).strip()
    return ""


def extract_city(text: str, rules: Sequence[CityRule] = CITY_RULES) -> str:
    """
    줄 단위가 아니라 전체 텍스트 기준. 등장 위치와 무관하게 priority 가
    가장 작은 도시가 이긴다. ('大阪 … 東京' 이면 東京)
    """
    for rule in sorted(rules, key=lambda r: r.priority):
        if rule.name in (text or ""):
            return rule.name
    return ""
