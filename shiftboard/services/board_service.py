"""Month board assembly and shift editing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..dao import schedules_dao, staff_dao
from ..domain import accounting
from ..domain import calendar as month_calendar
from ..domain import slots as shift_slots
from ..domain.models import CellSummary, DayOccupancy, ShiftAssignment, StaffMember, StaffStats
from .errors import UnknownStaffError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StaffRow:
    staff: StaffMember
    stats: StaffStats
    cells: Dict[date, CellSummary]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "staff": self.staff.as_dict(),
            "stats": self.stats.as_dict(),
            "cells": {day.isoformat(): cell.as_dict() for day, cell in sorted(self.cells.items())},
        }


@dataclass(slots=True)
class BoardView:
    ym: str
    prev_month: str
    next_month: str
    days: List[date]
    weeks: List[List[date]]
    roles: List[str]
    role_filter: str
    rows: List[StaffRow]
    occupancy: List[DayOccupancy]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "month": self.ym,
            "prev_month": self.prev_month,
            "next_month": self.next_month,
            "days": [day.isoformat() for day in self.days],
            "weeks": [[day.isoformat() for day in week] for week in self.weeks],
            "roles": self.roles,
            "role_filter": self.role_filter,
            "rows": [row.as_dict() for row in self.rows],
            "occupancy": [entry.as_dict() for entry in self.occupancy],
        }


def current_month() -> str:
    today = datetime.utcnow().date()
    return month_calendar.format_month(today.year, today.month)


def normalize_month(value: Optional[str]) -> str:
    """Return a canonical ``YYYY-MM``, defaulting to the current month."""
    if not value:
        return current_month()
    year, month = month_calendar.parse_month(value)
    return month_calendar.format_month(year, month)


def build_board(ym: str, role_filter: str = accounting.ROLE_FILTER_ALL) -> BoardView:
    year, month = month_calendar.parse_month(ym)
    days = month_calendar.month_days(year, month)
    weeks = month_calendar.group_by_week(days)

    staff = staff_dao.list_staff()
    assignments = schedules_dao.list_schedules(days[0], days[-1])

    by_staff: Dict[str, List[ShiftAssignment]] = {}
    for assignment in assignments:
        by_staff.setdefault(assignment.staff_id, []).append(assignment)
    cells = accounting.index_cells(assignments)

    rows: List[StaffRow] = []
    for member in accounting.filter_staff_by_role(staff, role_filter):
        own = by_staff.get(member.id, [])
        rows.append(
            StaffRow(
                staff=member,
                stats=accounting.compute_staff_stats(member, own, weeks),
                cells={a.date: cells[(member.id, a.date)] for a in own},
            )
        )

    return BoardView(
        ym=month_calendar.format_month(year, month),
        prev_month=month_calendar.format_month(*month_calendar.shift_month(year, month, -1)),
        next_month=month_calendar.format_month(*month_calendar.shift_month(year, month, 1)),
        days=days,
        weeks=weeks,
        roles=accounting.available_roles(staff),
        role_filter=role_filter,
        rows=rows,
        occupancy=accounting.daily_occupancy(days, assignments, staff, role_filter),
    )


def parse_day(value: Any) -> date:
    if not value:
        raise ValidationError("Date is required")
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise ValidationError("Date must be in YYYY-MM-DD format") from exc


def _parse_weekdays(values: Optional[Iterable[Any]]) -> List[int]:
    weekdays: List[int] = []
    for value in values or ():
        if isinstance(value, str) and value.strip().isdecimal():
            weekday = int(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            weekday = value
        else:
            raise ValidationError(f"Invalid weekday {value!r}")
        if not 0 <= weekday <= 6:
            raise ValidationError(f"Weekday must be between 0 (Sunday) and 6 (Saturday): {weekday}")
        weekdays.append(weekday)
    return weekdays


def target_days(day: date, weekdays: Sequence[int]) -> List[date]:
    """Dates a save applies to: *day* alone, or every matching weekday of its month."""
    if not weekdays:
        return [day]
    return month_calendar.days_matching_weekdays(
        month_calendar.month_days(day.year, day.month), weekdays
    )


def save_shifts(
    staff_id: str,
    day: date,
    slots: Iterable[Any],
    is_extra: Any = False,
    replicate_weekdays: Optional[Iterable[Any]] = None,
) -> List[date]:
    """Replace the staff member's slots on one day or on replicated weekdays.

    Every targeted date is written before this returns, so a month reload
    issued afterwards never sees a partial edit.
    """
    if not isinstance(is_extra, bool):
        raise ValidationError("is_extra must be a boolean")
    if not isinstance(slots, (list, tuple)):
        raise ValidationError("slots must be a list")
    if replicate_weekdays is not None and not isinstance(replicate_weekdays, (list, tuple)):
        raise ValidationError("replicate_weekdays must be a list")
    try:
        normalized = shift_slots.normalize_slots(slots)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    weekdays = _parse_weekdays(replicate_weekdays)

    if staff_dao.get_staff(staff_id) is None:
        raise UnknownStaffError(f"Unknown staff member {staff_id}")

    days = target_days(day, weekdays)
    if len(days) == 1:
        schedules_dao.replace_assignments(staff_id, days[0], normalized, is_extra)
    else:
        schedules_dao.replace_assignments_many(staff_id, days, normalized, is_extra)
    logger.info(
        "Saved %d slot(s) for staff %s on %d day(s) (extra=%s)",
        len(normalized),
        staff_id,
        len(days),
        is_extra,
    )
    return days


def day_detail(day: date, period: str, role_filter: str = accounting.ROLE_FILTER_ALL) -> Dict[str, Any]:
    """Who works the ``day``/``night`` half of *day*, most hours first."""
    try:
        shift_slots.slots_for_period(period)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    entries = accounting.day_roster(
        period,
        day,
        schedules_dao.list_schedules(day, day),
        staff_dao.list_staff(),
        role_filter,
    )
    return {
        "date": day.isoformat(),
        "period": period,
        "role_filter": role_filter,
        "entries": [entry.as_dict() for entry in entries],
        "total_hours": sum(entry.hours for entry in entries),
    }
