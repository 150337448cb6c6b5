"""
l4_merge

Reconciles an employee roster with an L4 (sick leave) export by PESEL and
writes the leave records of rostered employees to a formatted .xlsx.
"""

from __future__ import annotations

from l4_merge.errors import L4MergeError, OutputWriteError, SheetOpenError, UnsupportedFormatError
from l4_merge.merger import MergeReport, default_output_name, list_sheet_names, merge_files

__all__ = [
    "L4MergeError",
    "MergeReport",
    "OutputWriteError",
    "SheetOpenError",
    "UnsupportedFormatError",
    "default_output_name",
    "list_sheet_names",
    "merge_files",
]

__version__ = "0.1.0"
