from __future__ import annotations

import io
from typing import Sequence

import pandas as pd
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from ..common.datetime_utils import iter_iso_dates
from ..core.constants import (
    HEADER_FILL_COLOR,
    MAX_COLUMN_WIDTH,
    STATUS_FILL_COLORS,
    STATUS_FONT_COLOR,
)
from .model import ExportOptions, StudentSummary

SHEET_NAME = "Attendance"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SUMMARY_COLUMNS = ["Total Present", "Total Absent", "Total On Duty"]


def export_filename(staff_code: str, start: str, end: str) -> str:
    return f"attendance_{staff_code}_{start}_to_{end}.xlsx"


def build_attendance_workbook(
    summaries: Sequence[StudentSummary],
    start: str,
    end: str,
    options: ExportOptions | None = None,
) -> bytes:
    """Render the date-by-student matrix as an .xlsx file held in memory."""
    options = options or ExportOptions()
    dates = list(iter_iso_dates(start, end))

    columns = ["Reg No", "Name", *dates]
    if options.include_summary:
        columns += SUMMARY_COLUMNS

    rows = []
    for s in summaries:
        row = [s.student.reg_no, s.student.name]
        row += [s.status_by_date[d].value if d in s.status_by_date else None for d in dates]
        if options.include_summary:
            row += [s.total_present, s.total_absent, s.total_on_duty]
        rows.append(row)

    df = pd.DataFrame(rows, columns=columns)

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
        ws = writer.sheets[SHEET_NAME]

        header_fill = PatternFill("solid", start_color=HEADER_FILL_COLOR)
        header_font = Font(bold=True)
        for col_idx in range(1, len(columns) + 1):
            cell = ws.cell(row=1, column=col_idx)
            cell.font = header_font
            cell.fill = header_fill

        if options.include_colors and dates:
            status_font = Font(color=STATUS_FONT_COLOR)
            for row in ws.iter_rows(min_row=2, max_row=len(rows) + 1, min_col=3, max_col=2 + len(dates)):
                for cell in row:
                    color = STATUS_FILL_COLORS.get(cell.value)
                    if color:
                        cell.fill = PatternFill("solid", start_color=color)
                        cell.font = status_font

        for col_idx, header in enumerate(columns, start=1):
            longest = len(str(header))
            for row in rows:
                value = row[col_idx - 1]
                if value is not None:
                    longest = max(longest, len(str(value)))
            ws.column_dimensions[get_column_letter(col_idx)].width = min(longest + 2, MAX_COLUMN_WIDTH)

    return out.getvalue()
