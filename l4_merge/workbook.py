"""
Spreadsheet input: format detection, sheet discovery and reading a sheet as a
plain row grid.

.xlsx/.xlsm are read with openpyxl, legacy .xls with xlrd, both through
pandas so that cell types survive (text stays str, numbers stay numeric).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from l4_merge.errors import SheetOpenError, UnsupportedFormatError

logger = logging.getLogger("l4_merge")

ENGINES: Dict[str, str] = {
    ".xlsx": "openpyxl",
    ".xlsm": "openpyxl",
    ".xls": "xlrd",
}


def engine_for(file_path: Path) -> str:
    """Pick the pandas read engine from the file extension."""
    suffix = Path(file_path).suffix.lower()
    try:
        return ENGINES[suffix]
    except KeyError:
        raise UnsupportedFormatError(file_path) from None


def read_sheet_names(file_path: Path) -> List[str]:
    """
    Ordered sheet names of a workbook.
    Raises UnsupportedFormatError or SheetOpenError.
    """
    file_path = Path(file_path)
    engine = engine_for(file_path)
    try:
        with pd.ExcelFile(file_path, engine=engine) as xls:
            names = [str(n) for n in xls.sheet_names]
    except Exception as e:
        raise SheetOpenError(file_path, "*", str(e)) from e

    logger.debug(f"{file_path.name}: sheets={names}")
    return names


def read_sheet_rows(file_path: Path, sheet_name: str) -> List[List[Any]]:
    """
    Read one sheet as a list of rows, first sheet row first.
    No header interpretation; the parser decides what a row means.
    """
    file_path = Path(file_path)
    engine = engine_for(file_path)
    try:
        with pd.ExcelFile(file_path, engine=engine) as xls:
            if sheet_name not in xls.sheet_names:
                raise SheetOpenError(file_path, sheet_name, "no such sheet")
            raw = pd.read_excel(
                xls,
                sheet_name=sheet_name,
                header=None,
                dtype=object,
                keep_default_na=False,
            )
    except SheetOpenError:
        raise
    except Exception as e:
        raise SheetOpenError(file_path, sheet_name, str(e)) from e

    rows = raw.values.tolist()
    logger.debug(f"{file_path.name} | {sheet_name}: read {len(rows)} row(s), {raw.shape[1]} column(s)")
    return rows
