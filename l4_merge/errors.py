"""Run-level errors. Row and field problems never get here."""

from __future__ import annotations

from pathlib import Path


class L4MergeError(Exception):
    """Base exception for all merge run failures."""


class UnsupportedFormatError(L4MergeError):
    """File extension is not a spreadsheet format we can read."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.extension = self.path.suffix.lower()
        super().__init__(f"Unsupported file format: '{self.extension or '<none>'}' ({self.path.name})")


class SheetOpenError(L4MergeError):
    """Workbook could not be opened or the named sheet is missing."""

    def __init__(self, path: Path, sheet: str, reason: str) -> None:
        self.path = Path(path)
        self.sheet = sheet
        self.reason = reason
        super().__init__(f"Cannot open sheet '{sheet}' in {self.path.name}: {reason}")


class OutputWriteError(L4MergeError):
    """Output workbook could not be saved."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot write output file {self.path}: {reason}")
