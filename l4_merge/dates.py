from __future__ import annotations

import re
from datetime import date
from typing import Any, Optional

# Spreadsheet serial dates: 1900-01-01 is day 2 once the phantom 1900-02-29
# of the 1900 date system is counted.
EPOCH = date(1900, 1, 1)
EPOCH_OFFSET = 2

DATE_PART_REGEX = re.compile(r"[0-9]+")


def normalize_date(text: Any) -> Optional[int]:
    """
    Convert a 'YYYY-MM-DD' string into a spreadsheet serial day count.

    Returns None for anything else: non-strings, empty text, not exactly three
    dash-separated parts, non-numeric parts, or an impossible calendar date.
    """
    if not isinstance(text, str) or not text:
        return None

    parts = text.split("-")
    if len(parts) != 3:
        return None
    if not all(DATE_PART_REGEX.fullmatch(p) for p in parts):
        return None

    year, month, day = (int(p) for p in parts)
    try:
        d = date(year, month, day)
    except ValueError:
        return None

    return (d - EPOCH).days + EPOCH_OFFSET
