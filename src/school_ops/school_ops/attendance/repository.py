from __future__ import annotations

from typing import Callable, Protocol, Sequence

from ..common.subscriptions import Unsubscribe
from .model import AttendanceEvent


class AttendanceEventRepository(Protocol):
    """Append-only event log partitioned by calendar day."""

    def subscribe_day(self, day: str, on_update: Callable[[list[AttendanceEvent]], None]) -> Unsubscribe:
        """Deliver the full event log of ``day`` now and after every change."""

        raise NotImplementedError

    def list_for_day(self, day: str) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def has_event_since(self, *, subject_id: str, since_ms: int) -> bool:
        raise NotImplementedError

    def append(self, event: AttendanceEvent) -> str:
        """Persist a new event. Returns the assigned event_id."""

        raise NotImplementedError
