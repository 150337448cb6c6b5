"""
Merge pipeline: read roster + L4 sheets, keep L4 rows whose PESEL is on the
roster, write them out.

Every stage returns its result plus human-readable messages; nothing is
accumulated on shared state. The messages are also sent to the "l4_merge"
logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

from l4_merge.errors import L4MergeError
from l4_merge.parsing import ParsedSheet, parse_sheet
from l4_merge.reconcile import common_ids, filter_leave_records
from l4_merge.records import Source
from l4_merge.workbook import read_sheet_names, read_sheet_rows
from l4_merge.writer import write_output

logger = logging.getLogger("l4_merge")

DEFAULT_OUTPUT_TEMPLATE = "L4_{:%d-%m-%Y}.xlsx"


@dataclass
class MergeReport:
    roster_count: int
    leave_count: int
    common: FrozenSet[str]
    rows_written: int
    output_path: Path
    messages: List[str] = field(default_factory=list)

    @property
    def common_count(self) -> int:
        return len(self.common)


def default_output_name(today: Optional[date] = None) -> str:
    """Default output file name, e.g. L4_19-10-2026.xlsx."""
    return DEFAULT_OUTPUT_TEMPLATE.format(today or date.today())


def list_sheet_names(file_path: Path) -> Tuple[List[str], List[str]]:
    """
    Returns (sheet_names, messages). Never raises: on failure the list is
    empty and the reason is in messages.
    """
    file_path = Path(file_path)
    messages: List[str] = []
    try:
        names = read_sheet_names(file_path)
    except L4MergeError as e:
        msg = f"Failed to read sheet names: {e}"
        messages.append(msg)
        logger.warning(msg)
        return [], messages

    msg = f"Loaded {len(names)} sheet(s) from {file_path.name}"
    messages.append(msg)
    logger.info(msg)
    return names, messages


def _load(file_path: Path, sheet_name: str, source: Source) -> Tuple[ParsedSheet, List[str]]:
    rows = read_sheet_rows(file_path, sheet_name)
    parsed = parse_sheet(rows, source)
    messages = [
        f"{source.value}: read {parsed.parsed_count} PESEL record(s) from '{sheet_name}' "
        f"({parsed.rows_skipped} row(s) skipped)"
    ]
    logger.info(messages[0])
    return parsed, messages


def merge_files(
    roster_path: Path,
    leave_path: Path,
    output_path: Path,
    roster_sheet: str,
    leave_sheet: str,
) -> MergeReport:
    """
    Run the whole merge and write `output_path`.

    Both sheets are read before anything is written, so an input failure
    (UnsupportedFormatError, SheetOpenError) leaves no output behind.
    OutputWriteError is raised if the result cannot be saved.
    """
    roster_path = Path(roster_path)
    leave_path = Path(leave_path)
    output_path = Path(output_path)
    messages: List[str] = []

    logger.info(f"Reading roster: {roster_path.name} | sheet='{roster_sheet}'")
    roster, msgs = _load(roster_path, roster_sheet, Source.ROSTER)
    messages.extend(msgs)

    logger.info(f"Reading L4 export: {leave_path.name} | sheet='{leave_sheet}'")
    leave, msgs = _load(leave_path, leave_sheet, Source.LEAVE)
    messages.extend(msgs)

    records = roster.records + leave.records
    common = common_ids(records)
    filtered = filter_leave_records(records, common)

    write_output(filtered, output_path)

    for msg in (f"Common PESEL numbers: {len(common)}", f"Output file created: {output_path}"):
        messages.append(msg)
        logger.info(msg)

    return MergeReport(
        roster_count=roster.parsed_count,
        leave_count=leave.parsed_count,
        common=common,
        rows_written=len(filtered),
        output_path=output_path,
        messages=messages,
    )
