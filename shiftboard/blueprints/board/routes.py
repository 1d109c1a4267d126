"""Blueprint with the month board and shift editing."""

from __future__ import annotations

from flask import Blueprint, jsonify, render_template, request

from ...domain import slots as shift_slots
from ...domain.accounting import ROLE_FILTER_ALL
from ...domain.calendar import InvalidMonthFormatError
from ...services import board_service
from ...services.errors import UnknownStaffError, ValidationError
from .. import json_payload

bp = Blueprint("board", __name__)


def _role_filter(payload: dict | None = None) -> str:
    value = (payload or {}).get("role") or request.args.get("role")
    return value or ROLE_FILTER_ALL


@bp.route("/board")
def board_page():
    error: str | None = None
    try:
        month = board_service.normalize_month(request.args.get("month"))
    except InvalidMonthFormatError as exc:
        error = str(exc)
        month = board_service.current_month()
    view = board_service.build_board(month, _role_filter())
    return render_template(
        "board/index.html",
        view=view,
        slots=shift_slots.ALL_SLOTS,
        presets=shift_slots.PRESETS,
        error_message=error,
    )


@bp.route("/api/board")
def get_board():
    try:
        month = board_service.normalize_month(request.args.get("month"))
    except InvalidMonthFormatError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify(board_service.build_board(month, _role_filter()).as_dict())


@bp.post("/api/board/shifts")
def save_shifts():
    try:
        payload = json_payload()
        staff_id = payload.get("staff_id")
        if not staff_id or not isinstance(staff_id, str):
            raise ValidationError("staff_id is required")
        day = board_service.parse_day(payload.get("date"))
        targets = board_service.save_shifts(
            staff_id,
            day,
            payload.get("slots") or [],
            payload.get("is_extra", False),
            payload.get("replicate_weekdays") or [],
        )
    except ValidationError as exc:
        return jsonify({"error": str(exc)}), 400
    except UnknownStaffError as exc:
        return jsonify({"error": str(exc)}), 404

    month = f"{day.year:04d}-{day.month:02d}"
    view = board_service.build_board(month, _role_filter(payload))
    return jsonify(
        {
            "status": "ok",
            "dates": [target.isoformat() for target in targets],
            "board": view.as_dict(),
        }
    )


@bp.route("/api/board/day")
def day_detail():
    try:
        day = board_service.parse_day(request.args.get("date"))
        detail = board_service.day_detail(day, request.args.get("period", "day"), _role_filter())
    except ValidationError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify(detail)


@bp.route("/api/shift-presets")
def shift_presets():
    return jsonify(
        {
            "slots": list(shift_slots.ALL_SLOTS),
            "presets": {name: list(values) for name, values in shift_slots.PRESETS.items()},
        }
    )
