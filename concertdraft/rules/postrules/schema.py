# /rules/postrules/schema.py
# 커밋 경계 검증: pydantic 검증 결과를 "path: message" 문자열로
# -*- coding: utf-8 -*-
from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)


class ValidationResult(Generic[M]):
    def __init__(self, ok: bool, data: Optional[M] = None, error: str = ""):
        self.ok = ok
        self.data = data
        self.error = error

    def __repr__(self):
        return f"ValidationResult(ok={self.ok!r}, error={self.error!r})"


def format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        path = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{path}: {err.get('msg', 'invalid')}")
    return ", ".join(parts)


def parse_or_error(model: Type[M], data: Any) -> ValidationResult[M]:
    """검증 성공이면 ok=True + 모델, 실패면 ok=False + 'a.b: msg, c: msg'."""
    try:
        return ValidationResult(True, model.model_validate(data))
    except ValidationError as exc:
        return ValidationResult(False, error=format_validation_error(exc))
