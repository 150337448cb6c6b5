from __future__ import annotations

from typing import FrozenSet, Iterable, List, Set

from l4_merge.records import LeaveRecord, Record, Source


def common_ids(records: Iterable[Record]) -> FrozenSet[str]:
    """
    PESELs present in at least one roster record and at least one leave record.
    Duplicates within a source are irrelevant (set semantics).
    """
    roster_ids: Set[str] = set()
    leave_ids: Set[str] = set()

    for rec in records:
        if rec.source is Source.ROSTER:
            roster_ids.add(rec.id_number)
        else:
            leave_ids.add(rec.id_number)

    return frozenset(roster_ids & leave_ids)


def filter_leave_records(records: Iterable[Record], common: FrozenSet[str]) -> List[LeaveRecord]:
    """Leave records whose PESEL is in `common`, in their original order."""
    return [r for r in records if r.source is Source.LEAVE and r.id_number in common]
