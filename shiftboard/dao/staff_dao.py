from __future__ import annotations

import sqlite3
import uuid
from typing import Any, Dict, List, Optional

from ..domain.models import StaffMember
from . import db

_SELECT = (
    "SELECT s.id, s.created_at, s.full_name, s.cpf, s.rg, s.professional_id, s.driver_license, "
    "s.education, s.contact_phone, s.weekly_contracted_hours, s.role_id, r.name AS role_name "
    "FROM staff s LEFT JOIN roles r ON r.id = s.role_id"
)


def _to_staff(row: sqlite3.Row) -> StaffMember:
    return StaffMember(
        id=row["id"],
        full_name=row["full_name"],
        weekly_contracted_hours=int(row["weekly_contracted_hours"]),
        role_id=row["role_id"],
        role_name=row["role_name"],
        cpf=row["cpf"],
        rg=row["rg"],
        professional_id=row["professional_id"],
        driver_license=row["driver_license"],
        education=row["education"],
        contact_phone=row["contact_phone"],
        created_at=row["created_at"],
    )


def list_staff() -> List[StaffMember]:
    """Staff joined with role name, ordered by role then name."""
    rows = db.query_all(_SELECT + " ORDER BY s.role_id, s.full_name")
    return [_to_staff(row) for row in rows]


def get_staff(staff_id: str) -> Optional[StaffMember]:
    row = db.query_one(_SELECT + " WHERE s.id = ?", (staff_id,))
    if not row:
        return None
    return _to_staff(row)


def create_staff(payload: Dict[str, Any]) -> str:
    staff_id = uuid.uuid4().hex
    db.execute(
        "INSERT INTO staff(id, full_name, cpf, rg, professional_id, driver_license, education, "
        "contact_phone, weekly_contracted_hours, role_id) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
        (
            staff_id,
            payload["full_name"],
            payload["cpf"],
            payload.get("rg"),
            payload.get("professional_id"),
            payload.get("driver_license"),
            payload.get("education"),
            payload.get("contact_phone"),
            payload["weekly_contracted_hours"],
            payload.get("role_id"),
        ),
    )
    return staff_id


def delete_staff(staff_id: str) -> int:
    return db.execute("DELETE FROM staff WHERE id = ?", (staff_id,))
