"""
Row parsing for the two input sheets.

Rows arrive as plain sequences of cell values (text is str, numbers are
int/float, blanks are "" or NaN). Each rule returns a record or None; a row
that does not fit its rule is skipped, never an error.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from l4_merge.dates import normalize_date
from l4_merge.records import LeaveRecord, Record, RosterRecord, Source

logger = logging.getLogger("l4_merge")

# "<insured person> <PESEL>" in the first column of the L4 export
INSURED_PESEL_REGEX = re.compile(r"\s(\d{11})\Z")

# L4 export column positions (0-indexed)
LEAVE_COL_INSURED = 0
LEAVE_COL_FROM = 3
LEAVE_COL_TO = 4
LEAVE_COL_CARE = 5
LEAVE_COL_HOSPITAL = 6
LEAVE_COL_STATUS = 7

HEADER_ROWS = 1


@dataclass(frozen=True)
class ParsedSheet:
    source: Source
    records: Tuple[Record, ...]
    rows_seen: int
    rows_skipped: int

    @property
    def parsed_count(self) -> int:
        return len(self.records)


def _text_cell(row: Sequence[Any], idx: int) -> Optional[str]:
    """
    Return the cell as text if it is a non-empty string, else None.
    Numbers, blanks, NaN and missing trailing cells all count as absent.
    """
    if idx >= len(row):
        return None
    v = row[idx]
    if isinstance(v, str) and v != "":
        return v
    return None


def split_insured_name(text: str) -> Tuple[str, str]:
    """
    Split the name part of an L4 'insured' cell into (last_name, first_name).

    Whitespace split, first token is the surname, second the first name.
    Lossy for multi-word surnames; kept simple on purpose so a stricter
    parser can replace this one function.
    """
    parts = text.split()
    last_name = parts[0] if len(parts) > 0 else ""
    first_name = parts[1] if len(parts) > 1 else ""
    return last_name, first_name


def parse_roster_row(row: Sequence[Any]) -> Optional[RosterRecord]:
    cells = [_text_cell(row, i) for i in range(3)]
    if any(c is None for c in cells):
        return None
    last_name, first_name, id_number = cells
    return RosterRecord(last_name=last_name, first_name=first_name, id_number=id_number)


def parse_leave_row(row: Sequence[Any]) -> Optional[LeaveRecord]:
    insured = _text_cell(row, LEAVE_COL_INSURED)
    if insured is None:
        return None

    m = INSURED_PESEL_REGEX.search(insured)
    if m is None:
        return None

    last_name, first_name = split_insured_name(insured[: m.start()])

    return LeaveRecord(
        last_name=last_name,
        first_name=first_name,
        id_number=m.group(1),
        leave_start=normalize_date(_text_cell(row, LEAVE_COL_FROM)),
        leave_end=normalize_date(_text_cell(row, LEAVE_COL_TO)),
        care_flag=_text_cell(row, LEAVE_COL_CARE) or "",
        hospital_stay=_text_cell(row, LEAVE_COL_HOSPITAL) or "",
        cert_status=_text_cell(row, LEAVE_COL_STATUS) or "",
    )


ROW_RULES: Dict[Source, Callable[[Sequence[Any]], Optional[Record]]] = {
    Source.ROSTER: parse_roster_row,
    Source.LEAVE: parse_leave_row,
}


def parse_sheet(rows: Iterable[Sequence[Any]], source: Source) -> ParsedSheet:
    """
    Apply the row rule for `source` to every data row (the header row is
    skipped). Rows that do not fit are dropped and counted.
    """
    rule = ROW_RULES[source]
    records: List[Record] = []
    seen = 0
    skipped = 0

    for idx, row in enumerate(rows):
        if idx < HEADER_ROWS:
            continue
        seen += 1
        rec = rule(row)
        if rec is None:
            skipped += 1
            logger.debug(f"{source.value}: skipped row {idx} (shape mismatch)")
            continue
        records.append(rec)

    return ParsedSheet(source=source, records=tuple(records), rows_seen=seen, rows_skipped=skipped)
