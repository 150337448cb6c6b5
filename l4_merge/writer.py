"""
Output workbook: fixed 8-column layout, styled header, date-formatted
leave columns.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Sequence, Tuple

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from l4_merge.errors import OutputWriteError
from l4_merge.records import LeaveRecord

logger = logging.getLogger("l4_merge")

HEADERS = [
    "Last Name",
    "First Name",
    "ID Number",
    "Date From",
    "Date To",
    "Care Flag",
    "Hospital Stay",
    "Certificate Status",
]

COLUMN_WIDTHS = [20, 15, 12, 12, 12, 10, 15, 12]

DATE_COLUMNS = (3, 4)  # 0-indexed
DATE_FORMAT = "dd/mm/yyyy"

SHEET_TITLE = "L4"

HEADER_FILL_HEX = "4F81BD"
HEADER_FONT_HEX = "FFFFFF"


def output_rows(records: Sequence[LeaveRecord]) -> List[Tuple[Any, ...]]:
    """Cell values for each data row, in record order. Dates stay serial (or None)."""
    return [
        (
            r.last_name,
            r.first_name,
            r.id_number,
            r.leave_start,
            r.leave_end,
            r.care_flag,
            r.hospital_stay,
            r.cert_status,
        )
        for r in records
    ]


def _style_header(ws) -> None:
    thin = Side(style="thin")
    header_font = Font(bold=True, color=HEADER_FONT_HEX)
    header_fill = PatternFill("solid", fgColor=HEADER_FILL_HEX)
    header_border = Border(left=thin, right=thin, top=thin, bottom=thin)

    for col, title in enumerate(HEADERS, start=1):
        cell = ws.cell(row=1, column=col, value=title)
        cell.font = header_font
        cell.fill = header_fill
        cell.border = header_border


def build_workbook(records: Sequence[LeaveRecord]) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    _style_header(ws)

    for i, width in enumerate(COLUMN_WIDTHS, start=1):
        ws.column_dimensions[get_column_letter(i)].width = width

    for row_idx, values in enumerate(output_rows(records), start=2):
        for col_idx, value in enumerate(values):
            cell = ws.cell(row=row_idx, column=col_idx + 1)
            if col_idx in DATE_COLUMNS:
                # blank date cells still carry the date format
                cell.value = value
                cell.number_format = DATE_FORMAT
            else:
                # always a string cell, never a formula
                cell.value = ILLEGAL_CHARACTERS_RE.sub("", value)
                cell.data_type = "s"

    return wb


def write_output(records: Sequence[LeaveRecord], output_path: Path) -> Path:
    """Render `records` and save them to `output_path` (.xlsx)."""
    output_path = Path(output_path)
    wb = build_workbook(records)
    try:
        wb.save(output_path)
    except OSError as e:
        raise OutputWriteError(output_path, str(e)) from e

    logger.info(f"Wrote {len(records)} row(s) to {output_path.resolve()}")
    return output_path
