from __future__ import annotations

from io import BytesIO, StringIO
from typing import Any, Dict, List, Tuple

from ..adapters.report import csv_writer, xlsx_writer
from . import board_service


def hours_report(month_ym: str) -> Dict[str, Any]:
    view = board_service.build_board(month_ym)
    staff: List[Dict[str, Any]] = []
    totals = {"contractual_hours": 0, "extra_hours": 0}
    for row in view.rows:
        stats = row.stats
        staff.append(
            {
                "staff_id": row.staff.id,
                "staff": row.staff.full_name,
                "role": row.staff.role_name or "",
                "weekly_contracted_hours": row.staff.weekly_contracted_hours,
                "monthly_target": stats.monthly_target,
                "contractual_hours": stats.total_contractual_hours,
                "extra_hours": stats.total_extra_hours,
                "remaining_monthly": stats.remaining_monthly,
                "weeks": [week.as_dict() for week in stats.weekly],
            }
        )
        totals["contractual_hours"] += stats.total_contractual_hours
        totals["extra_hours"] += stats.total_extra_hours
    return {
        "month": view.ym,
        "staff": staff,
        "totals": totals,
        "meta": {"count": len(staff), "weeks": len(view.weeks)},
    }


def export_hours_csv(month_ym: str) -> Tuple[StringIO, str]:
    report = hours_report(month_ym)
    buffer = StringIO()
    csv_writer.write_hours(buffer, report["staff"])
    buffer.seek(0)
    filename = f"hours_{report['month']}.csv"
    return buffer, filename


def export_xlsx(month_ym: str) -> Tuple[BytesIO, str]:
    view = board_service.build_board(month_ym)
    stream = BytesIO()
    xlsx_writer.write_board(stream, view)
    stream.seek(0)
    return stream, f"board_{view.ym}.xlsx"
