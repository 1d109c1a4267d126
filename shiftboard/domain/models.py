"""Domain dataclasses for the shift board."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Role:
    id: str
    name: str

    def as_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass
class StaffMember:
    id: str
    full_name: str
    weekly_contracted_hours: int
    role_id: Optional[str] = None
    # Joined from ``roles``; None when the staff member has no role.
    role_name: Optional[str] = None
    cpf: str = ""
    rg: Optional[str] = None
    professional_id: Optional[str] = None
    driver_license: Optional[str] = None
    education: Optional[str] = None
    contact_phone: Optional[str] = None
    created_at: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "weekly_contracted_hours": self.weekly_contracted_hours,
            "role_id": self.role_id,
            "role_name": self.role_name,
            "cpf": self.cpf,
            "rg": self.rg,
            "professional_id": self.professional_id,
            "driver_license": self.driver_license,
            "education": self.education,
            "contact_phone": self.contact_phone,
            "created_at": self.created_at,
        }


@dataclass
class Vehicle:
    id: str
    name: str
    plate: str
    renavam: Optional[str] = None
    model: Optional[str] = None
    license_number: Optional[str] = None
    year: Optional[int] = None
    status: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "plate": self.plate,
            "renavam": self.renavam,
            "model": self.model,
            "license_number": self.license_number,
            "year": self.year,
            "status": self.status,
        }


@dataclass(frozen=True)
class ShiftAssignment:
    staff_id: str
    date: date
    slot: str
    is_extra: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return {
            "staff_id": self.staff_id,
            "date": self.date.isoformat(),
            "slot": self.slot,
            "is_extra": self.is_extra,
        }


@dataclass(frozen=True)
class WeekStats:
    week_index: int
    start: date
    end: date
    contractual_hours: int
    extra_hours: int
    is_over_limit: bool
    is_under_limit: bool
    is_exact: bool

    def as_dict(self) -> Dict[str, Any]:
        return {
            "week_index": self.week_index,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "contractual_hours": self.contractual_hours,
            "extra_hours": self.extra_hours,
            "is_over_limit": self.is_over_limit,
            "is_under_limit": self.is_under_limit,
            "is_exact": self.is_exact,
        }


@dataclass
class StaffStats:
    monthly_target: int
    total_contractual_hours: int
    total_extra_hours: int
    remaining_monthly: int
    weekly: List[WeekStats] = field(default_factory=list)

    @property
    def is_monthly_over(self) -> bool:
        return self.remaining_monthly < 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "monthly_target": self.monthly_target,
            "total_contractual_hours": self.total_contractual_hours,
            "total_extra_hours": self.total_extra_hours,
            "remaining_monthly": self.remaining_monthly,
            "is_monthly_over": self.is_monthly_over,
            "weekly": [week.as_dict() for week in self.weekly],
        }


@dataclass(frozen=True)
class CellSummary:
    day_hours: int
    night_hours: int
    is_extra: bool
    slots: tuple

    @property
    def total_hours(self) -> int:
        return self.day_hours + self.night_hours

    def as_dict(self) -> Dict[str, Any]:
        return {
            "day_hours": self.day_hours,
            "night_hours": self.night_hours,
            "is_extra": self.is_extra,
            "slots": list(self.slots),
        }


@dataclass(frozen=True)
class DayOccupancy:
    day: date
    day_count: int
    night_count: int
    is_weekend: bool

    def as_dict(self) -> Dict[str, Any]:
        return {
            "date": self.day.isoformat(),
            "day_count": self.day_count,
            "night_count": self.night_count,
            "is_weekend": self.is_weekend,
        }


@dataclass(frozen=True)
class RosterEntry:
    staff: StaffMember
    hours: int
    is_extra: bool
    slots: tuple

    def as_dict(self) -> Dict[str, Any]:
        return {
            "staff_id": self.staff.id,
            "full_name": self.staff.full_name,
            "role_name": self.staff.role_name,
            "hours": self.hours,
            "is_extra": self.is_extra,
            "slots": list(self.slots),
        }
