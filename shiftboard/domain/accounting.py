"""Contractual/extra hour accounting and staffing occupancy."""
from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from . import slots as shift_slots
from .calendar import is_weekend
from .models import (
    CellSummary,
    DayOccupancy,
    RosterEntry,
    ShiftAssignment,
    StaffMember,
    StaffStats,
    WeekStats,
)

ROLE_FILTER_ALL = "all"

# Flat month length used for the monthly quota.
WEEKS_PER_MONTH = 4


def monthly_target(weekly_contracted_hours: int) -> int:
    assert weekly_contracted_hours > 0, f"weekly hours must be positive: {weekly_contracted_hours}"
    return weekly_contracted_hours * WEEKS_PER_MONTH


def hours_for_assignments(assignments: Sequence[ShiftAssignment]) -> int:
    return len(assignments) * shift_slots.SLOT_HOURS


def split_extra(assignments: Iterable[ShiftAssignment]) -> Tuple[List[ShiftAssignment], List[ShiftAssignment]]:
    """Return ``(contractual, extra)`` preserving input order."""
    contractual: List[ShiftAssignment] = []
    extra: List[ShiftAssignment] = []
    for assignment in assignments:
        (extra if assignment.is_extra else contractual).append(assignment)
    return contractual, extra


def compute_staff_stats(
    staff: StaffMember,
    assignments: Sequence[ShiftAssignment],
    weeks: Sequence[Sequence[date]],
) -> StaffStats:
    """Monthly totals plus one over/under/exact entry per week bucket.

    *assignments* must already be restricted to *staff*. Extra hours are
    reported but never count toward the weekly classification.
    """
    contractual, extra = split_extra(assignments)
    target = monthly_target(staff.weekly_contracted_hours)
    total_contractual = hours_for_assignments(contractual)

    weekly: List[WeekStats] = []
    for index, week in enumerate(weeks, start=1):
        start, end = week[0], week[-1]
        week_contractual = hours_for_assignments([a for a in contractual if start <= a.date <= end])
        week_extra = hours_for_assignments([a for a in extra if start <= a.date <= end])
        limit = staff.weekly_contracted_hours
        weekly.append(
            WeekStats(
                week_index=index,
                start=start,
                end=end,
                contractual_hours=week_contractual,
                extra_hours=week_extra,
                is_over_limit=week_contractual > limit,
                is_under_limit=week_contractual < limit,
                is_exact=week_contractual == limit,
            )
        )

    return StaffStats(
        monthly_target=target,
        total_contractual_hours=total_contractual,
        total_extra_hours=hours_for_assignments(extra),
        remaining_monthly=target - total_contractual,
        weekly=weekly,
    )


def matches_role(staff: StaffMember, role_filter: str) -> bool:
    if role_filter == ROLE_FILTER_ALL:
        return True
    return staff.role_name is not None and staff.role_name == role_filter


def filter_staff_by_role(staff: Iterable[StaffMember], role_filter: str) -> List[StaffMember]:
    return [member for member in staff if matches_role(member, role_filter)]


def available_roles(staff: Iterable[StaffMember]) -> List[str]:
    """Distinct role names in first-seen order, skipping role-less staff."""
    seen: Dict[str, None] = {}
    for member in staff:
        if member.role_name:
            seen.setdefault(member.role_name, None)
    return list(seen)


def _present_staff(period: str, day: date, assignments: Iterable[ShiftAssignment]) -> Dict[str, List[ShiftAssignment]]:
    wanted = shift_slots.slots_for_period(period)
    present: Dict[str, List[ShiftAssignment]] = {}
    for assignment in assignments:
        if assignment.date == day and assignment.slot in wanted:
            present.setdefault(assignment.staff_id, []).append(assignment)
    return present


def occupancy(
    period: str,
    day: date,
    assignments: Iterable[ShiftAssignment],
    staff_roster: Iterable[StaffMember],
    role_filter: str = ROLE_FILTER_ALL,
) -> int:
    """Count distinct staff working the ``day`` or ``night`` half of *day*."""
    roster = {member.id: member for member in staff_roster}
    count = 0
    for staff_id in _present_staff(period, day, assignments):
        member = roster.get(staff_id)
        if member is not None and matches_role(member, role_filter):
            count += 1
    return count


def daily_occupancy(
    days: Iterable[date],
    assignments: Sequence[ShiftAssignment],
    staff_roster: Sequence[StaffMember],
    role_filter: str = ROLE_FILTER_ALL,
) -> List[DayOccupancy]:
    by_day: Dict[date, List[ShiftAssignment]] = defaultdict(list)
    for assignment in assignments:
        by_day[assignment.date].append(assignment)
    return [
        DayOccupancy(
            day=day,
            day_count=occupancy("day", day, by_day.get(day, ()), staff_roster, role_filter),
            night_count=occupancy("night", day, by_day.get(day, ()), staff_roster, role_filter),
            is_weekend=is_weekend(day),
        )
        for day in days
    ]


def cell_summary(assignments: Sequence[ShiftAssignment]) -> CellSummary:
    """Summarise one staff member's rows for one date."""
    present = {a.slot for a in assignments}
    day_rows = [a for a in assignments if a.slot in shift_slots.DAY_SLOTS]
    night_rows = [a for a in assignments if a.slot in shift_slots.NIGHT_SLOTS]
    return CellSummary(
        day_hours=hours_for_assignments(day_rows),
        night_hours=hours_for_assignments(night_rows),
        is_extra=any(a.is_extra for a in assignments),
        slots=tuple(slot for slot in shift_slots.ALL_SLOTS if slot in present),
    )


def index_cells(assignments: Iterable[ShiftAssignment]) -> Dict[Tuple[str, date], CellSummary]:
    grouped: Dict[Tuple[str, date], List[ShiftAssignment]] = defaultdict(list)
    for assignment in assignments:
        grouped[(assignment.staff_id, assignment.date)].append(assignment)
    return {key: cell_summary(rows) for key, rows in grouped.items()}


def day_roster(
    period: str,
    day: date,
    assignments: Iterable[ShiftAssignment],
    staff_roster: Iterable[StaffMember],
    role_filter: str = ROLE_FILTER_ALL,
) -> List[RosterEntry]:
    """Staff present in one half of *day*, most hours first."""
    roster: Mapping[str, StaffMember] = {member.id: member for member in staff_roster}
    entries: List[RosterEntry] = []
    for staff_id, rows in _present_staff(period, day, assignments).items():
        member = roster.get(staff_id)
        if member is None or not matches_role(member, role_filter):
            continue
        entries.append(
            RosterEntry(
                staff=member,
                hours=hours_for_assignments(rows),
                is_extra=any(a.is_extra for a in rows),
                slots=tuple(a.slot for a in rows),
            )
        )
    entries.sort(key=lambda entry: entry.hours, reverse=True)
    return entries
