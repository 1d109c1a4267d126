"""Staff, vehicle and role registration."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

from flask import current_app

from ..dao import roles_dao, staff_dao, vehicles_dao
from .errors import ValidationError

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")


def format_cpf(value: str) -> str:
    """Format up to 11 digits as ``000.000.000-00``, ignoring anything else."""
    digits = _NON_DIGITS.sub("", value or "")[:11]
    parts = [digits[:3], digits[3:6], digits[6:9]]
    head = ".".join(part for part in parts if part)
    tail = digits[9:]
    return f"{head}-{tail}" if tail else head


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _weekly_hours(value: Any) -> int:
    if value is None or value == "":
        return int(current_app.config.get("DEFAULT_WEEKLY_HOURS", 36))
    if isinstance(value, bool):
        raise ValidationError("Weekly contracted hours must be a whole number")
    try:
        hours = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Weekly contracted hours must be a whole number") from exc
    if hours != float(value) or hours <= 0:
        raise ValidationError("Weekly contracted hours must be a positive whole number")
    return hours


def validate_staff(payload: Dict[str, Any]) -> Dict[str, Any]:
    role_id = _clean(payload.get("role_id"))
    if not role_id:
        raise ValidationError("A role must be selected")
    if roles_dao.get_role(role_id) is None:
        raise ValidationError(f"Unknown role {role_id}")
    full_name = _clean(payload.get("full_name"))
    if not full_name:
        raise ValidationError("Full name is required")
    cpf = _clean(payload.get("cpf"))
    if not cpf:
        raise ValidationError("CPF is required")
    return {
        "full_name": full_name,
        "cpf": format_cpf(cpf),
        "rg": _clean(payload.get("rg")),
        "professional_id": _clean(payload.get("professional_id")),
        "driver_license": _clean(payload.get("driver_license")),
        "education": _clean(payload.get("education")),
        "contact_phone": _clean(payload.get("contact_phone")),
        "weekly_contracted_hours": _weekly_hours(payload.get("weekly_contracted_hours")),
        "role_id": role_id,
    }


def register_staff(payload: Dict[str, Any]) -> str:
    clean = validate_staff(payload)
    staff_id = staff_dao.create_staff(clean)
    logger.info("Registered staff %s (%s)", staff_id, clean["full_name"])
    return staff_id


def validate_vehicle(payload: Dict[str, Any]) -> Dict[str, Any]:
    name = _clean(payload.get("name"))
    if not name:
        raise ValidationError("Vehicle name is required")
    plate = _clean(payload.get("plate"))
    if not plate:
        raise ValidationError("Plate is required")
    year_raw = _clean(payload.get("year"))
    year: Optional[int] = None
    if year_raw is not None:
        try:
            year = int(year_raw)
        except ValueError as exc:
            raise ValidationError("Year must be a number") from exc
    return {
        "name": name,
        "plate": plate.upper(),
        "renavam": _clean(payload.get("renavam")),
        "model": _clean(payload.get("model")),
        "license_number": _clean(payload.get("license_number")),
        "year": year,
        "status": _clean(payload.get("status")),
    }


def register_vehicle(payload: Dict[str, Any]) -> str:
    clean = validate_vehicle(payload)
    vehicle_id = vehicles_dao.create_vehicle(clean)
    logger.info("Registered vehicle %s (%s)", vehicle_id, clean["plate"])
    return vehicle_id


def register_role(payload: Dict[str, Any]) -> str:
    name = _clean(payload.get("name"))
    if not name:
        raise ValidationError("Role name is required")
    return roles_dao.create_role(name)
