from __future__ import annotations

import logging
from dataclasses import replace
from datetime import MAXYEAR, MINYEAR
from typing import Optional

from ..common.datetime_utils import now_epoch_ms, now_local
from ..common.subscriptions import Unsubscribe
from ..common.validators import require_day_string, require_hhmm, require_non_empty
from ..core.enums import Period
from ..core.exceptions import AppointmentNotFound, ValidationError
from .calendar_grid import annotate_month, count_by_date, next_month, previous_month
from .model import Appointment, MonthCursor, MonthView
from .repository import AppointmentStore

logger = logging.getLogger(__name__)


def _parse_period(value: Period | str | None) -> Period:
    if isinstance(value, Period):
        return value
    try:
        return Period(value or Period.MORNING.value)
    except ValueError:
        raise ValidationError(f"Unknown period: {value}") from None


def _checked_month(year: int, month0: int) -> MonthCursor:
    if not 0 <= int(month0) <= 11:
        raise ValidationError("month must be between 0 and 11")
    if not MINYEAR <= int(year) <= MAXYEAR:
        raise ValidationError(f"year must be between {MINYEAR} and {MAXYEAR}")
    return MonthCursor(int(year), int(month0))


class SchedulingService:
    """Specialist appointment calendar.

    Listings are always answered from the latest full snapshot pushed by the
    store; create/delete never patch local state, so a failed write leaves the
    calendar exactly as it was.
    """

    def __init__(self, store: AppointmentStore, *, cursor: Optional[MonthCursor] = None):
        self._store = store
        if cursor is None:
            today = now_local().date()
            cursor = MonthCursor(today.year, today.month - 1)
        self._cursor = cursor
        self._appointments: list[Appointment] = []
        self._unsubscribe: Optional[Unsubscribe] = store.subscribe_all(self._on_snapshot)

    def _on_snapshot(self, appointments: list[Appointment]) -> None:
        self._appointments = list(appointments)

    def close(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    # --- listings -------------------------------------------------------

    def list_for_day(self, date: str) -> list[Appointment]:
        # HH:MM is zero-padded 24h, so string order is time order.
        return sorted((a for a in self._appointments if a.date == date), key=lambda a: a.time)

    def month_view(self, cursor: Optional[MonthCursor] = None) -> MonthView:
        cursor = _checked_month(cursor.year, cursor.month0) if cursor else self._cursor
        return annotate_month(cursor, count_by_date(self._appointments))

    # --- navigation -----------------------------------------------------

    @property
    def cursor(self) -> MonthCursor:
        return self._cursor

    def resolve_month(self, year: Optional[int] = None, month0: Optional[int] = None, step: Optional[str] = None) -> MonthCursor:
        """Month reached from (year, month0) by an optional "prev"/"next" step.

        Missing parts default to the displayed month, which is left unchanged.
        """
        cursor = _checked_month(
            self._cursor.year if year is None else year,
            self._cursor.month0 if month0 is None else month0,
        )
        if step == "prev":
            cursor = previous_month(cursor)
        elif step == "next":
            cursor = next_month(cursor)
        elif step:
            raise ValidationError(f"Unknown step: {step}")
        return _checked_month(cursor.year, cursor.month0)

    def go_to(self, year: int, month0: int) -> MonthCursor:
        self._cursor = _checked_month(year, month0)
        return self._cursor

    def previous_month(self) -> MonthCursor:
        self._cursor = self.resolve_month(step="prev")
        return self._cursor

    def next_month(self) -> MonthCursor:
        self._cursor = self.resolve_month(step="next")
        return self._cursor

    # --- mutations ------------------------------------------------------

    def create(self, draft: Appointment) -> Appointment:
        """Validate a draft and hand it to the store, which assigns the identifier.

        Overlapping appointments are allowed; concurrent attendances at
        different places are legitimate.
        """
        subject_id = require_non_empty(draft.subject_id, "subject_id")
        date = require_day_string(draft.date, "date")
        time = require_hhmm(draft.time, "time")

        to_store = replace(
            draft,
            appointment_id="",
            subject_id=subject_id,
            subject_name=(draft.subject_name or "").strip(),
            date=date,
            time=time,
            period=_parse_period(draft.period),
            description=(draft.description or "").strip(),
            created_at=draft.created_at or now_epoch_ms(),
        )
        persisted = self._store.create(to_store)
        logger.info("appointment %s created for %s on %s %s", persisted.appointment_id, subject_id, date, time)
        return persisted

    def delete(self, appointment_id: str) -> bool:
        """Remove an appointment. Callers gate this behind a user confirmation.

        Returns False when the store reports the id as already gone.
        """
        appointment_id = require_non_empty(appointment_id, "appointment_id")
        try:
            self._store.remove(appointment_id)
        except AppointmentNotFound:
            logger.info("appointment %s already removed", appointment_id)
            return False
        return True
