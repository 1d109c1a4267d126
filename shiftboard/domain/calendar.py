"""Month enumeration and Sunday-first week partitioning."""
from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Sequence, Tuple

__all__ = [
    "InvalidMonthFormatError",
    "days_matching_weekdays",
    "format_month",
    "group_by_week",
    "is_weekend",
    "month_bounds",
    "month_days",
    "parse_month",
    "shift_month",
    "sunday_weekday",
]

SATURDAY = calendar.SATURDAY


class InvalidMonthFormatError(ValueError):
    """Raised when a month value is not ``YYYY-MM``."""


def parse_month(value: Optional[str]) -> Tuple[int, int]:
    """Validate a ``YYYY-MM`` value and return ``(year, month)``."""
    if not value:
        raise InvalidMonthFormatError("Month value is required")
    try:
        parsed = datetime.strptime(value.strip(), "%Y-%m")
    except ValueError as exc:
        raise InvalidMonthFormatError("Month must be in YYYY-MM format") from exc
    return parsed.year, parsed.month


def format_month(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move ``delta`` months forward (or back when negative)."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last day of *month*, numbered 1 (January) to 12."""
    assert 1 <= month <= 12, f"month out of range: {month}"
    _, num_days = calendar.monthrange(year, month)
    return date(year, month, 1), date(year, month, num_days)


def month_days(year: int, month: int) -> List[date]:
    """Return every day of the month, 1st to last, ascending. *month* is 1-based."""
    first, last = month_bounds(year, month)
    return [first + timedelta(days=offset) for offset in range((last - first).days + 1)]


def group_by_week(days: Sequence[date]) -> List[List[date]]:
    """Split *days* into buckets that close on Saturday or at the end.

    Weeks start on Sunday, so the first and last buckets of a month may be
    partial. No bucket is ever empty.
    """
    weeks: List[List[date]] = []
    current: List[date] = []
    last_index = len(days) - 1
    for index, day in enumerate(days):
        current.append(day)
        if day.weekday() == SATURDAY or index == last_index:
            weeks.append(current)
            current = []
    return weeks


def sunday_weekday(day: date) -> int:
    """Weekday number with 0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def days_matching_weekdays(days: Iterable[date], weekdays: Iterable[int]) -> List[date]:
    """Filter *days* to those whose :func:`sunday_weekday` is in *weekdays*."""
    wanted = set(weekdays)
    return [day for day in days if sunday_weekday(day) in wanted]
