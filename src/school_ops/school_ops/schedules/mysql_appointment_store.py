from __future__ import annotations

from dataclasses import replace
from typing import Callable, Sequence

from ..common.subscriptions import SnapshotFeed, Unsubscribe
from ..core.enums import Period
from ..core.exceptions import AppointmentNotFound
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_str_id, db_cursor, fetchall
from .model import Appointment
from .repository import AppointmentStore


class MySQLAppointmentStore(AppointmentStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._feed: SnapshotFeed[Appointment] = SnapshotFeed(self.list_all)

    def subscribe_all(self, on_update: Callable[[list[Appointment]], None]) -> Unsubscribe:
        return self._feed.subscribe(on_update)

    def refresh(self) -> None:
        self._feed.publish()

    def list_all(self) -> Sequence[Appointment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT appointment_id, subject_id, subject_name, date_string, time_string,
                       period, description, created_at_ms
                FROM appointments
                ORDER BY date_string ASC, time_string ASC
                """
            )
            return [
                Appointment(
                    appointment_id=as_str_id(r["appointment_id"]),
                    subject_id=str(r["subject_id"]),
                    subject_name=r.get("subject_name") or "",
                    date=r["date_string"],
                    time=r["time_string"],
                    period=Period(r["period"]),
                    description=r.get("description") or "",
                    created_at=int(r.get("created_at_ms") or 0),
                )
                for r in fetchall(cur)
            ]

    def create(self, appointment: Appointment) -> Appointment:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO appointments(subject_id, subject_name, date_string, time_string,
                                         period, description, created_at_ms)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    appointment.subject_id,
                    appointment.subject_name,
                    appointment.date,
                    appointment.time,
                    appointment.period.value,
                    appointment.description,
                    int(appointment.created_at),
                ),
            )
            persisted = replace(appointment, appointment_id=as_str_id(cur.lastrowid))
        self._feed.publish()
        return persisted

    def remove(self, appointment_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM appointments WHERE appointment_id=%s", (appointment_id,))
            if cur.rowcount == 0:
                raise AppointmentNotFound(appointment_id)
        self._feed.publish()
