from __future__ import annotations

from typing import Callable, Sequence

from ..common.subscriptions import KeyedSnapshotFeed, Unsubscribe
from ..core.enums import EventKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_str_id, db_cursor, fetchall, fetchone
from .model import AttendanceEvent
from .repository import AttendanceEventRepository

LOG_TABLES = frozenset({"attendance_logs", "staff_attendance_logs"})


class MySQLAttendanceEventRepository(AttendanceEventRepository):
    """Event log backed by one of the log tables (students or staff share the layout)."""

    def __init__(self, conn_factory: DatabaseConnection, *, table: str = "attendance_logs"):
        if table not in LOG_TABLES:
            raise ValueError(f"Unsupported log table: {table}")
        self._conn_factory = conn_factory
        self._table = table
        self._feeds: KeyedSnapshotFeed[AttendanceEvent] = KeyedSnapshotFeed(self.list_for_day)

    def subscribe_day(self, day: str, on_update: Callable[[list[AttendanceEvent]], None]) -> Unsubscribe:
        return self._feeds.subscribe(day, on_update)

    def list_for_day(self, day: str) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT event_id, subject_id, subject_name, class_name, timestamp_ms, kind, day_string
                FROM {self._table}
                WHERE day_string=%s
                ORDER BY timestamp_ms ASC
                """,
                (day,),
            )
            return [
                AttendanceEvent(
                    event_id=as_str_id(r["event_id"]),
                    subject_id=str(r["subject_id"]),
                    subject_name=r.get("subject_name") or "",
                    class_code=r.get("class_name") or "",
                    timestamp=int(r["timestamp_ms"]),
                    kind=EventKind(r["kind"]) if r.get("kind") else None,
                    day=r["day_string"],
                )
                for r in fetchall(cur)
            ]

    def has_event_since(self, *, subject_id: str, since_ms: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT 1 AS found FROM {self._table} WHERE subject_id=%s AND timestamp_ms > %s LIMIT 1",
                (subject_id, int(since_ms)),
            )
            return fetchone(cur) is not None

    def append(self, event: AttendanceEvent) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {self._table}(subject_id, subject_name, class_name, timestamp_ms, kind, day_string)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    event.subject_id,
                    event.subject_name,
                    event.class_code,
                    int(event.timestamp),
                    event.kind.value if event.kind else None,
                    event.day,
                ),
            )
            event_id = as_str_id(cur.lastrowid)
        self._feeds.publish(event.day)
        return event_id
