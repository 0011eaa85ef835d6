# /rules/postrules/price.py
# 가격 스캔 (¥8,800 / ￥8800 / 3,500円)
# -*- coding: utf-8 -*-
from typing import Optional

from .patterns import RE_PRICE


def extract_price(text: str) -> Optional[int]:
    m = RE_PRICE.search(text or "")
    if not m:
        return None
    raw = (m.group('yen') or m.group('grouped') or '').replace(',', '')
    # '¥,' 처럼 숫자가 없으면 가격 없음
    if not raw.isdigit():
        return None
    value = int(raw)
    return value if value > 0 else None
