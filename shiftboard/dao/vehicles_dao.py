from __future__ import annotations

import uuid
from typing import Any, Dict, List

from ..domain.models import Vehicle
from . import db


def list_vehicles() -> List[Vehicle]:
    rows = db.query_all(
        "SELECT id, name, plate, renavam, model, license_number, year, status FROM vehicles ORDER BY name"
    )
    return [
        Vehicle(
            id=row["id"],
            name=row["name"],
            plate=row["plate"],
            renavam=row["renavam"],
            model=row["model"],
            license_number=row["license_number"],
            year=row["year"],
            status=row["status"],
        )
        for row in rows
    ]


def create_vehicle(payload: Dict[str, Any]) -> str:
    vehicle_id = uuid.uuid4().hex
    db.execute(
        "INSERT INTO vehicles(id, name, plate, renavam, model, license_number, year, status) "
        "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
        (
            vehicle_id,
            payload["name"],
            payload["plate"],
            payload.get("renavam"),
            payload.get("model"),
            payload.get("license_number"),
            payload.get("year"),
            payload.get("status"),
        ),
    )
    return vehicle_id


def delete_vehicle(vehicle_id: str) -> int:
    return db.execute("DELETE FROM vehicles WHERE id = ?", (vehicle_id,))
