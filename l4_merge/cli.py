"""
Command line front end.

    l4-merge --roster pracownicy.xlsx --leave l4.xls
    l4-merge --roster pracownicy.xlsx --leave l4.xls --list-sheets
    l4-merge --roster pracownicy.xlsx --roster-sheet Lista --leave l4.xls --out wynik.xlsx

Sheets default to the first sheet of each workbook; the output defaults to
L4_<dd-mm-YYYY>.xlsx in the current directory.

Logs:
- Console + <log-dir>/l4_merge.log
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from l4_merge.errors import L4MergeError
from l4_merge.merger import default_output_name, list_sheet_names, merge_files


# ----------
# Logging
# ----------

def setup_logging(debug: bool, log_dir: str = "logs") -> logging.Logger:
    logger = logging.getLogger("l4_merge")
    logger.setLevel(logging.DEBUG)

    if logger.handlers:
        return logger

    os.makedirs(log_dir, exist_ok=True)
    log_path = Path(log_dir) / "l4_merge.log"

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)-7s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setLevel(logging.DEBUG if debug else logging.INFO)
    fh.setFormatter(fmt)

    sh = logging.StreamHandler(sys.stdout)
    sh.setLevel(logging.DEBUG if debug else logging.INFO)
    sh.setFormatter(fmt)

    logger.addHandler(fh)
    logger.addHandler(sh)
    return logger


# -----
# Main
# -----

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="l4-merge",
        description="Keep the L4 (sick leave) records of employees listed on the roster, matched by PESEL.",
    )
    parser.add_argument("--roster", required=True, help="Employee roster workbook (.xlsx/.xlsm/.xls): last name, first name, PESEL")
    parser.add_argument("--leave", required=True, help="L4 export workbook (.xlsx/.xlsm/.xls)")
    parser.add_argument("--roster-sheet", default=None, help="Roster sheet name (default: first sheet)")
    parser.add_argument("--leave-sheet", default=None, help="L4 sheet name (default: first sheet)")
    parser.add_argument("--out", default=None, help="Output .xlsx (default: L4_<dd-mm-YYYY>.xlsx)")
    parser.add_argument("--list-sheets", action="store_true", help="Print the sheet names of both workbooks and exit")
    parser.add_argument("--log-dir", default="logs", help="Folder for l4_merge.log (default: logs)")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    return parser


def _first_sheet(path: Path, logger: logging.Logger) -> Optional[str]:
    names, _ = list_sheet_names(path)
    if not names:
        logger.error(f"No sheets available in {path.name}")
        return None
    return names[0]


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logger = setup_logging(args.debug, args.log_dir)

    roster_path = Path(args.roster)
    leave_path = Path(args.leave)

    for p in (roster_path, leave_path):
        if not p.exists():
            logger.error(f"Input file not found: {p.resolve()}")
            sys.exit(2)

    if args.list_sheets:
        for p in (roster_path, leave_path):
            names, _ = list_sheet_names(p)
            print(f"{p.name}:")
            for n in names:
                print(f"  {n}")
        return

    roster_sheet = args.roster_sheet or _first_sheet(roster_path, logger)
    leave_sheet = args.leave_sheet or _first_sheet(leave_path, logger)
    if roster_sheet is None or leave_sheet is None:
        sys.exit(1)

    out_path = Path(args.out or default_output_name())

    try:
        report = merge_files(
            roster_path=roster_path,
            leave_path=leave_path,
            output_path=out_path,
            roster_sheet=roster_sheet,
            leave_sheet=leave_sheet,
        )
    except L4MergeError as e:
        logger.error(f"Merge failed: {e}")
        sys.exit(1)

    logger.info(
        f"Done: roster={report.roster_count} l4={report.leave_count} "
        f"common={report.common_count} rows_written={report.rows_written}"
    )


if __name__ == "__main__":
    main()
