"""HTTP blueprints for the board, resources and reports."""

from __future__ import annotations

from typing import Any, Dict

from flask import request

from ..services.errors import ValidationError


def json_payload() -> Dict[str, Any]:
    """Return the request body as a JSON object; missing bodies read as empty."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload
