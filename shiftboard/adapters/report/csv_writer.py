"""CSV report helpers."""
from __future__ import annotations

import csv
from typing import Any, Iterable, Mapping, TextIO

HOURS_HEADER = [
    "staff_id",
    "staff",
    "role",
    "weekly_contracted_hours",
    "monthly_target",
    "contractual_hours",
    "extra_hours",
    "remaining_monthly",
]


def write_hours(handle: TextIO, rows: Iterable[Mapping[str, Any]]) -> None:
    writer = csv.writer(handle)
    writer.writerow(HOURS_HEADER)
    for row in rows:
        writer.writerow([row[column] for column in HOURS_HEADER])
