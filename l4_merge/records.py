"""
Record model shared by the parser, the reconciliation step and the writer.

A record is one of two shapes, tagged by its source:
- RosterRecord: who is employed (membership only)
- LeaveRecord: one L4 certificate row (the thing we emit)

Both expose the same field set so downstream code can read either one; the
roster shape simply has no leave dates and empty free-text attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Source(str, Enum):
    ROSTER = "roster"
    LEAVE = "leave"


@dataclass(frozen=True)
class RosterRecord:
    last_name: str
    first_name: str
    id_number: str

    @property
    def source(self) -> Source:
        return Source.ROSTER

    @property
    def leave_start(self) -> Optional[int]:
        return None

    @property
    def leave_end(self) -> Optional[int]:
        return None

    @property
    def care_flag(self) -> str:
        return ""

    @property
    def hospital_stay(self) -> str:
        return ""

    @property
    def cert_status(self) -> str:
        return ""


@dataclass(frozen=True)
class LeaveRecord:
    last_name: str
    first_name: str
    id_number: str
    leave_start: Optional[int] = None  # spreadsheet serial day
    leave_end: Optional[int] = None
    care_flag: str = ""
    hospital_stay: str = ""
    cert_status: str = ""

    @property
    def source(self) -> Source:
        return Source.LEAVE


Record = Union[RosterRecord, LeaveRecord]
