"""Data access for shift assignments."""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import Iterable, List, Sequence

from ..domain.models import ShiftAssignment
from . import db


def _to_assignment(row: sqlite3.Row) -> ShiftAssignment:
    return ShiftAssignment(
        staff_id=row["staff_id"],
        date=date.fromisoformat(row["date"]),
        slot=row["shift_slot"],
        is_extra=bool(row["is_extra"]),
    )


def list_schedules(start: date, end: date) -> List[ShiftAssignment]:
    """Return assignments with ``start <= date <= end``."""
    rows = db.query_all(
        "SELECT staff_id, date, shift_slot, is_extra FROM schedules "
        "WHERE date >= ? AND date <= ? ORDER BY date, staff_id, id",
        (start.isoformat(), end.isoformat()),
    )
    return [_to_assignment(row) for row in rows]


def list_for_staff_day(staff_id: str, day: date) -> List[ShiftAssignment]:
    rows = db.query_all(
        "SELECT staff_id, date, shift_slot, is_extra FROM schedules "
        "WHERE staff_id = ? AND date = ? ORDER BY id",
        (staff_id, day.isoformat()),
    )
    return [_to_assignment(row) for row in rows]


def _replace(conn: sqlite3.Connection, staff_id: str, day: date, slots: Sequence[str], is_extra: bool) -> int:
    conn.execute(
        "DELETE FROM schedules WHERE staff_id = ? AND date = ?",
        (staff_id, day.isoformat()),
    )
    batch = [(staff_id, day.isoformat(), slot, 1 if is_extra else 0) for slot in slots]
    if batch:
        conn.executemany(
            "INSERT INTO schedules(staff_id, date, shift_slot, is_extra) VALUES (?, ?, ?, ?)",
            batch,
        )
    return len(batch)


def replace_assignments(staff_id: str, day: date, slots: Sequence[str], is_extra: bool) -> int:
    """Replace every slot of ``(staff_id, day)``; an empty *slots* clears it."""
    with db.transaction() as conn:
        return _replace(conn, staff_id, day, slots, is_extra)


def replace_assignments_many(
    staff_id: str,
    days: Iterable[date],
    slots: Sequence[str],
    is_extra: bool,
) -> int:
    """Apply the same replacement to every day in a single transaction."""
    inserted = 0
    with db.transaction() as conn:
        for day in days:
            inserted += _replace(conn, staff_id, day, slots, is_extra)
    return inserted
