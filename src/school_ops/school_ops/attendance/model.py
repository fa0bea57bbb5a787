from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EventKind
from ..roster.model import RosterMember


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one resolved entry/exit scan. Immutable once recorded.

    ``kind`` is ``None`` for legacy records (and staff logs) that carry no kind tag.
    """

    event_id: str
    subject_id: str
    subject_name: str
    class_code: str
    timestamp: int
    kind: Optional[EventKind]
    day: str


@dataclass(frozen=True)
class PresenceSnapshot:
    """Read-model: who is present/absent for one day and class filter. Never persisted."""

    total: int
    present: tuple[RosterMember, ...]
    absent: tuple[RosterMember, ...]
    rate: int

    @property
    def present_count(self) -> int:
        return len(self.present)

    @property
    def absent_count(self) -> int:
        return len(self.absent)

    def as_dict(self) -> dict:
        return {
            "total": self.total,
            "present": self.present_count,
            "absent": self.absent_count,
            "rate": self.rate,
            "present_members": [_member_dict(m) for m in self.present],
            "absent_members": [_member_dict(m) for m in self.absent],
        }


EMPTY_SNAPSHOT = PresenceSnapshot(total=0, present=(), absent=(), rate=0)


def _member_dict(m: RosterMember) -> dict:
    return {"id": m.member_id, "name": m.name, "class": m.class_code, "photo_url": m.photo_url}
