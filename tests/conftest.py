"""Shared fixtures: small real workbooks built with openpyxl."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Sequence

import pytest
from openpyxl import Workbook

ROSTER_HEADER = ["Nazwisko", "Imię", "PESEL"]
LEAVE_HEADER = [
    "Ubezpieczony",
    "Seria i nr zaśw.",
    "Data wyst.",
    "Od",
    "Do",
    "Na opiekę",
    "Pobyt w szpitalu",
    "Status zaśw.",
]


def write_workbook(path: Path, sheets: Dict[str, List[Sequence[Any]]]) -> Path:
    wb = Workbook()
    wb.remove(wb.active)
    for name, rows in sheets.items():
        ws = wb.create_sheet(title=name)
        for row in rows:
            ws.append(list(row))
    wb.save(path)
    return path


@pytest.fixture
def roster_file(tmp_path):
    return write_workbook(
        tmp_path / "pracownicy.xlsx",
        {
            "Pracownicy": [
                ROSTER_HEADER,
                ["Nowak", "Jan", "12345678901"],
                ["Kowalska", "Anna", "85010112345"],
                ["Wiśniewski", "Piotr", "90020254321"],
            ],
            "Notatki": [["nothing to see"]],
        },
    )


@pytest.fixture
def leave_file(tmp_path):
    return write_workbook(
        tmp_path / "l4.xlsx",
        {
            "Zaświadczenia": [
                LEAVE_HEADER,
                ["NOWAK JAN 12345678901", "ZUS 001", "2024-01-09", "2024-01-10", "2024-01-20", "Yes", "No", "Approved"],
                ["ZIELIŃSKI TOMASZ 77777777777", "ZUS 002", "2024-02-01", "2024-02-02", "2024-02-05", "", "", "Approved"],
                ["KOWALSKA ANNA 85010112345", "ZUS 003", "2024-03-01", "bad-date", None, "No", "Yes", "Cancelled"],
            ],
        },
    )
