"""Command line helpers registered on the Flask app."""

from __future__ import annotations

from pathlib import Path

import click
from flask.cli import with_appcontext

from .adapters.report import xlsx_writer
from .domain.calendar import InvalidMonthFormatError
from .services import board_service


@click.command("export-xlsx")
@click.argument("month")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Target .xlsx file.")
@with_appcontext
def export_xlsx_command(month: str, output: Path | None) -> None:
    """Write the board of MONTH (YYYY-MM) to an Excel workbook."""
    try:
        ym = board_service.normalize_month(month)
    except InvalidMonthFormatError as exc:
        raise click.BadParameter(str(exc), param_hint="MONTH") from exc
    view = board_service.build_board(ym)
    target = output or Path(f"board_{ym}.xlsx")
    xlsx_writer.write_board(target, view)
    click.echo(f"Saved: {target}")
