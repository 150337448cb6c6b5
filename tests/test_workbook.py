"""Tests for reading input workbooks into row grids."""

from __future__ import annotations

import pytest

from l4_merge.errors import SheetOpenError, UnsupportedFormatError
from l4_merge.workbook import engine_for, read_sheet_names, read_sheet_rows
from tests.conftest import write_workbook


@pytest.mark.parametrize(
    "name, engine",
    [("a.xlsx", "openpyxl"), ("a.XLSX", "openpyxl"), ("a.xlsm", "openpyxl"), ("a.xls", "xlrd")],
)
def test_engine_by_extension(tmp_path, name, engine):
    assert engine_for(tmp_path / name) == engine


@pytest.mark.parametrize("name", ["a.csv", "a.ods", "a.txt", "noext"])
def test_unsupported_extension(tmp_path, name):
    with pytest.raises(UnsupportedFormatError):
        engine_for(tmp_path / name)


def test_sheet_names_in_order(roster_file):
    assert read_sheet_names(roster_file) == ["Pracownicy", "Notatki"]


def test_sheet_names_of_corrupt_file(tmp_path):
    bad = tmp_path / "broken.xlsx"
    bad.write_bytes(b"this is not a zip archive")
    with pytest.raises(SheetOpenError):
        read_sheet_names(bad)


def test_rows_keep_cell_types(tmp_path):
    path = write_workbook(
        tmp_path / "types.xlsx",
        {"S": [["h1", "h2", "h3"], ["Nowak", 12345678901, None], ["NA", "", "N/A"]]},
    )
    rows = read_sheet_rows(path, "S")

    assert rows[0] == ["h1", "h2", "h3"]
    assert rows[1][0] == "Nowak"
    assert not isinstance(rows[1][1], str)
    assert int(rows[1][1]) == 12345678901
    assert not (isinstance(rows[1][2], str) and rows[1][2] != "")
    # text that looks like a missing-value marker stays text
    assert rows[2][0] == "NA"
    assert rows[2][2] == "N/A"


def test_rows_of_missing_sheet(roster_file):
    with pytest.raises(SheetOpenError) as exc:
        read_sheet_rows(roster_file, "Nope")
    assert exc.value.sheet == "Nope"


def test_rows_of_missing_file(tmp_path):
    with pytest.raises(SheetOpenError):
        read_sheet_rows(tmp_path / "gone.xlsx", "Arkusz1")


def test_rows_of_unsupported_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b,c\n")
    with pytest.raises(UnsupportedFormatError):
        read_sheet_rows(path, "data")


def test_xls_goes_through_xlrd(tmp_path):
    bad = tmp_path / "l4.xls"
    bad.write_bytes(b"not an OLE2 compound document")
    with pytest.raises(SheetOpenError) as exc:
        read_sheet_rows(bad, "Arkusz1")
    assert exc.value.path == bad
    with pytest.raises(SheetOpenError):
        read_sheet_names(bad)
