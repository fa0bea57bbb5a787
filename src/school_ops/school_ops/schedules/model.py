from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Period


@dataclass(frozen=True)
class Appointment:
    """A specialist (AEE) appointment.

    ``appointment_id`` is empty while the appointment is a draft and is
    assigned by the store on create. Several appointments may share a date and
    time; no conflict detection is done.
    """

    appointment_id: str
    subject_id: str
    subject_name: str
    date: str
    time: str
    period: Period
    description: str = ""
    created_at: int = 0

    def as_dict(self) -> dict:
        return {
            "id": self.appointment_id,
            "subject_id": self.subject_id,
            "subject_name": self.subject_name,
            "date": self.date,
            "time": self.time,
            "period": self.period.value,
            "description": self.description,
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class DayCell:
    day: int
    date: str
    appointment_count: int


@dataclass(frozen=True)
class MonthCursor:
    """Displayed (year, month) pair; ``month0`` is 0-based (0 = January)."""

    year: int
    month0: int

    def label(self) -> str:
        return f"{self.year:04d}-{self.month0 + 1:02d}"


@dataclass(frozen=True)
class MonthView:
    cursor: MonthCursor
    cells: tuple[Optional[DayCell], ...]

    def as_dict(self) -> dict:
        return {
            "year": self.cursor.year,
            "month": self.cursor.month0,
            "label": self.cursor.label(),
            "cells": [
                None if c is None else {"day": c.day, "date": c.date, "appointments": c.appointment_count}
                for c in self.cells
            ],
        }
