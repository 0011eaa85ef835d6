# -*- coding: utf-8 -*-
from .datetimex import extract_nearest_date, NearestDate
from .public import parse_concert_announcement
from .schema import parse_or_error, ValidationResult

__all__ = [
    "parse_concert_announcement", "extract_nearest_date", "NearestDate",
    "parse_or_error", "ValidationResult",
]
