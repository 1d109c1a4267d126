from __future__ import annotations

from flask import Blueprint, Response, jsonify, render_template, request

from ...domain.calendar import InvalidMonthFormatError
from ...services import board_service, reports_service

bp = Blueprint("reports", __name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@bp.route("/reports")
def reports_page():
    try:
        month = board_service.normalize_month(request.args.get("month"))
    except InvalidMonthFormatError:
        month = board_service.current_month()
    report = reports_service.hours_report(month)
    return render_template("reports/index.html", report=report, month=month)


@bp.route("/api/reports/hours")
def hours_api():
    try:
        month = board_service.normalize_month(request.args.get("month"))
    except InvalidMonthFormatError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify(reports_service.hours_report(month))


@bp.route("/api/reports/hours.csv")
def hours_csv():
    try:
        month = board_service.normalize_month(request.args.get("month"))
    except InvalidMonthFormatError as exc:
        return jsonify({"error": str(exc)}), 400
    buffer, filename = reports_service.export_hours_csv(month)
    return Response(
        buffer.getvalue(),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@bp.route("/api/export/xlsx")
def export_xlsx():
    try:
        month = board_service.normalize_month(request.args.get("month"))
    except InvalidMonthFormatError as exc:
        return jsonify({"error": str(exc)}), 400
    stream, filename = reports_service.export_xlsx(month)
    return Response(
        stream.getvalue(),
        mimetype=XLSX_MIMETYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
