"""Date range presets offered by the dashboard and list pages"""

import calendar
from datetime import date
from enum import Enum
from typing import Tuple


class DateRangePreset(str, Enum):
    THIS_MONTH = "this_month"
    LAST_MONTH = "last_month"
    THIS_YEAR = "this_year"
    LAST_YEAR = "last_year"


def _month_bounds(year: int, month: int) -> Tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def resolve_date_range(preset: DateRangePreset, today: date) -> Tuple[date, date]:
    """Inclusive (start, end) of a preset relative to today"""
    if preset == DateRangePreset.THIS_MONTH:
        return _month_bounds(today.year, today.month)
    if preset == DateRangePreset.LAST_MONTH:
        if today.month == 1:
            return _month_bounds(today.year - 1, 12)
        return _month_bounds(today.year, today.month - 1)
    if preset == DateRangePreset.THIS_YEAR:
        return date(today.year, 1, 1), date(today.year, 12, 31)
    if preset == DateRangePreset.LAST_YEAR:
        return date(today.year - 1, 1, 1), date(today.year - 1, 12, 31)
    raise ValueError(f"Unknown date range preset: {preset}")
