"""Presence partitioning: roster + event log -> present/absent snapshot.

Pure functions only. Roster and event snapshots may have been captured at
slightly different times; events for subjects outside the filtered roster are
simply ignored because counts are taken over the roster.
"""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.constants import ALL_CLASSES_LABEL
from ..core.enums import EventKind
from ..roster.model import RosterMember
from .model import AttendanceEvent, PresenceSnapshot


def counts_as_entry(event: AttendanceEvent) -> bool:
    # Legacy records without a kind tag are entries.
    return event.kind is None or event.kind == EventKind.ENTRY


def entered_subject_ids(events: Iterable[AttendanceEvent]) -> set[str]:
    return {e.subject_id for e in events if counts_as_entry(e)}


def filter_by_class(roster: Iterable[RosterMember], class_filter: Optional[str]) -> list[RosterMember]:
    if not class_filter or class_filter == ALL_CLASSES_LABEL:
        return list(roster)
    return [m for m in roster if m.class_code == class_filter]


def presence_rate(present: int, total: int) -> int:
    """Integer percentage rounded half up; 0 for an empty roster."""
    if total <= 0:
        return 0
    return (present * 200 + total) // (total * 2)


def compute_presence(
    roster: Sequence[RosterMember],
    events: Sequence[AttendanceEvent],
    class_filter: Optional[str] = None,
) -> PresenceSnapshot:
    members = filter_by_class(roster, class_filter)
    entered = entered_subject_ids(events)

    present = tuple(m for m in members if m.member_id in entered)
    absent = tuple(m for m in members if m.member_id not in entered)
    total = len(members)

    return PresenceSnapshot(total=total, present=present, absent=absent, rate=presence_rate(len(present), total))
