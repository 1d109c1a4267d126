"""Excel report writer."""
from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

if TYPE_CHECKING:
    from ...services.board_service import BoardView


HEADER_FONT = Font(bold=True)
CENTER = Alignment(horizontal="center", vertical="center")
EXTRA_FILL = PatternFill(fill_type="solid", start_color="FDE68A", end_color="FDE68A")
OVER_FONT = Font(bold=True, color="B91C1C")

SUMMARY_HEADERS = ["Target", "Contractual", "Extra", "Remaining"]


def _cell_text(day_hours: int, night_hours: int) -> str:
    parts = []
    if day_hours:
        parts.append(f"D{day_hours}")
    if night_hours:
        parts.append(f"N{night_hours}")
    return "/".join(parts)


def write_board(target: Union[str, Path, IO[bytes]], view: "BoardView", *, title: str | None = None) -> None:
    """Write the month grid: one row per staff member, one column per day."""
    wb = Workbook()
    ws = wb.active
    ws.title = title or view.ym

    ws.cell(row=1, column=1, value="Staff").font = HEADER_FONT
    ws.cell(row=1, column=2, value="Role").font = HEADER_FONT
    for idx, day in enumerate(view.days, start=3):
        cell = ws.cell(row=1, column=idx, value=day.strftime("%d/%m"))
        cell.font = HEADER_FONT
        cell.alignment = CENTER
    summary_col = len(view.days) + 3
    for offset, header in enumerate(SUMMARY_HEADERS):
        ws.cell(row=1, column=summary_col + offset, value=header).font = HEADER_FONT

    for row_idx, row in enumerate(view.rows, start=2):
        ws.cell(row=row_idx, column=1, value=row.staff.full_name).font = HEADER_FONT
        ws.cell(row=row_idx, column=2, value=row.staff.role_name or "")
        for col_idx, day in enumerate(view.days, start=3):
            summary = row.cells.get(day)
            if summary is None:
                continue
            cell = ws.cell(row=row_idx, column=col_idx, value=_cell_text(summary.day_hours, summary.night_hours))
            cell.alignment = CENTER
            if summary.is_extra:
                cell.fill = EXTRA_FILL
        stats = row.stats
        values = [
            stats.monthly_target,
            stats.total_contractual_hours,
            stats.total_extra_hours,
            stats.remaining_monthly,
        ]
        for offset, value in enumerate(values):
            ws.cell(row=row_idx, column=summary_col + offset, value=value)
        if stats.is_monthly_over:
            ws.cell(row=row_idx, column=summary_col + 3).font = OVER_FONT

    occupancy_row = len(view.rows) + 3
    ws.cell(row=occupancy_row, column=1, value="Day staff").font = HEADER_FONT
    ws.cell(row=occupancy_row + 1, column=1, value="Night staff").font = HEADER_FONT
    for col_idx, entry in enumerate(view.occupancy, start=3):
        ws.cell(row=occupancy_row, column=col_idx, value=entry.day_count).alignment = CENTER
        ws.cell(row=occupancy_row + 1, column=col_idx, value=entry.night_count).alignment = CENTER

    if isinstance(target, (str, Path)):
        target = str(Path(target))
    wb.save(target)
