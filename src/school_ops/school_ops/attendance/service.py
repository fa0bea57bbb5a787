from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local, to_day_string
from ..common.subscriptions import Unsubscribe
from ..common.validators import require_non_empty
from ..core.enums import EducationLevel, EventKind, RecordOutcome
from ..roster.classifier import ClassLevelClassifier
from ..roster.model import RosterMember
from .model import EMPTY_SNAPSHOT, AttendanceEvent, PresenceSnapshot
from .presence import compute_presence
from .repository import AttendanceEventRepository

logger = logging.getLogger(__name__)

SubscribeRoster = Callable[[Callable[[list[RosterMember]], None]], Unsubscribe]


class AttendanceRecorder:
    """Appends resolved identity scans to an event log.

    A second scan of the same subject inside ``window_minutes`` is dropped so a
    badge held in front of the reader does not produce a burst of events.
    """

    def __init__(
        self,
        events: AttendanceEventRepository,
        *,
        window_minutes: int,
        default_kind: Optional[EventKind] = EventKind.ENTRY,
    ):
        self._events = events
        self._window_ms = int(window_minutes) * 60 * 1000
        self._default_kind = default_kind

    def record(
        self,
        subject: RosterMember,
        *,
        kind: Optional[EventKind] = None,
        now: datetime | None = None,
    ) -> RecordOutcome:
        subject_id = require_non_empty(subject.member_id, "subject_id")
        now = now or now_local()
        now_ms = int(now.timestamp() * 1000)

        if self._events.has_event_since(subject_id=subject_id, since_ms=now_ms - self._window_ms):
            logger.info("scan for %s ignored: already recorded in the last %d ms", subject_id, self._window_ms)
            return RecordOutcome.TOO_SOON

        self._events.append(
            AttendanceEvent(
                event_id="",
                subject_id=subject_id,
                subject_name=subject.name,
                class_code=subject.class_code,
                timestamp=now_ms,
                kind=kind or self._default_kind,
                day=to_day_string(now.date()),
            )
        )
        return RecordOutcome.RECORDED


class PresenceMonitor:
    """Live presence view for one selected day and class filter.

    Holds the latest roster and event-log snapshots and recomputes the whole
    PresenceSnapshot on every notification. Call ``close()`` (or use it as a
    context manager) when the owning view goes away.
    """

    def __init__(
        self,
        subscribe_roster: SubscribeRoster,
        events: AttendanceEventRepository,
        *,
        day: str,
        class_filter: Optional[str] = None,
        level: Optional[EducationLevel] = None,
        classifier: ClassLevelClassifier | None = None,
        on_change: Optional[Callable[[PresenceSnapshot], None]] = None,
    ):
        self._events = events
        self._day = day
        self._class_filter = class_filter
        self._level = level
        self._classifier = classifier or ClassLevelClassifier()
        self._on_change = on_change

        self._roster: list[RosterMember] = []
        self._log: list[AttendanceEvent] = []
        self._snapshot = EMPTY_SNAPSHOT
        self._closed = False

        self._unsub_events: Optional[Unsubscribe] = None
        self._unsub_roster: Optional[Unsubscribe] = subscribe_roster(self._on_roster)
        try:
            self._unsub_events = events.subscribe_day(day, self._on_events)
        except Exception:
            self.close()
            raise

    @property
    def day(self) -> str:
        return self._day

    @property
    def snapshot(self) -> PresenceSnapshot:
        return self._snapshot

    def select_day(self, day: str) -> None:
        if self._closed or day == self._day:
            return
        if self._unsub_events:
            self._unsub_events()
            self._unsub_events = None
        self._day = day
        self._log = []
        self._unsub_events = self._events.subscribe_day(day, self._on_events)

    def set_filters(self, *, class_filter: Optional[str] = None, level: Optional[EducationLevel] = None) -> None:
        self._class_filter = class_filter
        self._level = level
        self._recompute()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        for unsub in (self._unsub_roster, self._unsub_events):
            if unsub:
                unsub()
        self._unsub_roster = None
        self._unsub_events = None

    def __enter__(self) -> "PresenceMonitor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _on_roster(self, members: list[RosterMember]) -> None:
        self._roster = list(members)
        self._recompute()

    def _on_events(self, events: list[AttendanceEvent]) -> None:
        self._log = list(events)
        self._recompute()

    def _recompute(self) -> None:
        if self._closed:
            return
        roster = self._classifier.filter_by_level(self._roster, self._level)
        self._snapshot = compute_presence(roster, self._log, self._class_filter)
        if self._on_change:
            self._on_change(self._snapshot)


class PresenceService:
    """Builds monitors and one-shot snapshots over a roster + event log pair."""

    def __init__(
        self,
        subscribe_roster: SubscribeRoster,
        events: AttendanceEventRepository,
        *,
        classifier: ClassLevelClassifier | None = None,
    ):
        self._subscribe_roster = subscribe_roster
        self._events = events
        self._classifier = classifier or ClassLevelClassifier()

    def monitor(
        self,
        *,
        day: str,
        class_filter: Optional[str] = None,
        level: Optional[EducationLevel] = None,
        on_change: Optional[Callable[[PresenceSnapshot], None]] = None,
    ) -> PresenceMonitor:
        return PresenceMonitor(
            self._subscribe_roster,
            self._events,
            day=day,
            class_filter=class_filter,
            level=level,
            classifier=self._classifier,
            on_change=on_change,
        )

    def snapshot_for(
        self,
        *,
        day: str,
        class_filter: Optional[str] = None,
        level: Optional[EducationLevel] = None,
    ) -> PresenceSnapshot:
        with self.monitor(day=day, class_filter=class_filter, level=level) as m:
            return m.snapshot
