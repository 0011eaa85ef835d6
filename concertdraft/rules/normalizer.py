# 줄 분리/공백 정리
import re
from typing import List


def split_lines(text: str) -> List[str]:
    """줄바꿈 기준으로 나누고 trim, 빈 줄은 버린다."""
    return [ln for ln in (raw.strip() for raw in re.split(r"\r?\n", text or "")) if ln]
