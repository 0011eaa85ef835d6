# /rules/postrules/textutils.py
# 공통 유틸(날짜 조립/ID 생성)
# -*- coding: utf-8 -*-
import random
import string
import time
from datetime import date
from typing import Optional

_BASE36 = string.digits + string.ascii_lowercase


def _pad(n) -> str:
    return f"{int(n):02d}"


def _iso_date(year, month, day) -> Optional[str]:
    """달력상 존재하지 않는 날짜(13월, 2/30 등)는 None."""
    try:
        return date(int(year), int(month), int(day)).isoformat()
    except ValueError:
        return None


def gen_id(prefix: str) -> str:
    # ms-1767225600000-k3x9a 형태
    suffix = ''.join(random.choices(_BASE36, k=5))
    return f"{prefix}-{int(time.time() * 1000)}-{suffix}"
