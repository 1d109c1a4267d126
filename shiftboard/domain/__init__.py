"""Domain objects and pure calculations for the shift board."""

from .models import (
    CellSummary,
    DayOccupancy,
    Role,
    RosterEntry,
    ShiftAssignment,
    StaffMember,
    StaffStats,
    Vehicle,
    WeekStats,
)

__all__ = [
    "CellSummary",
    "DayOccupancy",
    "Role",
    "RosterEntry",
    "ShiftAssignment",
    "StaffMember",
    "StaffStats",
    "Vehicle",
    "WeekStats",
]
