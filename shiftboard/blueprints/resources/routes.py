from __future__ import annotations

from flask import Blueprint, jsonify, render_template

from ...dao import roles_dao, staff_dao, vehicles_dao
from ...services import resources_service
from ...services.errors import ValidationError
from .. import json_payload

bp = Blueprint("resources", __name__)


@bp.route("/resources")
def resources_page():
    return render_template(
        "resources/index.html",
        roles=roles_dao.list_roles(),
        staff=staff_dao.list_staff(),
        vehicles=vehicles_dao.list_vehicles(),
    )


@bp.route("/api/roles", methods=["GET"])
def list_roles():
    return jsonify({"roles": [role.as_dict() for role in roles_dao.list_roles()]})


@bp.route("/api/roles", methods=["POST"])
def create_role():
    try:
        payload = json_payload()
        role_id = resources_service.register_role(payload)
    except ValidationError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify({"id": role_id}), 201


@bp.route("/api/staff", methods=["GET"])
def list_staff():
    return jsonify({"staff": [member.as_dict() for member in staff_dao.list_staff()]})


@bp.route("/api/staff", methods=["POST"])
def create_staff():
    try:
        payload = json_payload()
        staff_id = resources_service.register_staff(payload)
    except ValidationError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify({"id": staff_id}), 201


@bp.route("/api/staff/<staff_id>", methods=["DELETE"])
def delete_staff(staff_id: str):
    deleted = staff_dao.delete_staff(staff_id)
    return jsonify({"deleted": deleted})


@bp.route("/api/vehicles", methods=["GET"])
def list_vehicles():
    return jsonify({"vehicles": [vehicle.as_dict() for vehicle in vehicles_dao.list_vehicles()]})


@bp.route("/api/vehicles", methods=["POST"])
def create_vehicle():
    try:
        payload = json_payload()
        vehicle_id = resources_service.register_vehicle(payload)
    except ValidationError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify({"id": vehicle_id}), 201


@bp.route("/api/vehicles/<vehicle_id>", methods=["DELETE"])
def delete_vehicle(vehicle_id: str):
    deleted = vehicles_dao.delete_vehicle(vehicle_id)
    return jsonify({"deleted": deleted})
