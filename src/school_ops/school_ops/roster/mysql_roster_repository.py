from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..common.subscriptions import SnapshotFeed, Unsubscribe
from ..core.enums import WorkPeriod
from ..core.exceptions import StudentNotFound
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_str_id, db_cursor, fetchall, fetchone
from .model import StaffMember, Student
from .repository import StaffRepository, StudentRepository

_STUDENT_COLUMNS = "student_id, name, class_name, photo_url, is_aee, disorder, report_url"


def _row_to_student(r: dict) -> Student:
    return Student(
        member_id=as_str_id(r["student_id"]),
        name=r["name"],
        class_code=r.get("class_name") or "",
        photo_url=r.get("photo_url"),
        is_aee=bool(r.get("is_aee", False)),
        disorder=r.get("disorder"),
        report_url=r.get("report_url"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._feed: SnapshotFeed[Student] = SnapshotFeed(self.list_all)

    def subscribe(self, on_update: Callable[[list[Student]], None]) -> Unsubscribe:
        return self._feed.subscribe(on_update)

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_STUDENT_COLUMNS} FROM students ORDER BY name ASC")
            return [_row_to_student(r) for r in fetchall(cur)]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_STUDENT_COLUMNS} FROM students WHERE student_id=%s", (student_id,))
            r = fetchone(cur)
            return _row_to_student(r) if r else None

    def update(self, student: Student) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET name=%s, class_name=%s, photo_url=%s, is_aee=%s, disorder=%s, report_url=%s
                WHERE student_id=%s
                """,
                (
                    student.name,
                    student.class_code,
                    student.photo_url,
                    int(student.is_aee),
                    student.disorder,
                    student.report_url,
                    student.member_id,
                ),
            )
            if cur.rowcount == 0:
                cur.execute("SELECT 1 AS found FROM students WHERE student_id=%s", (student.member_id,))
                if not fetchone(cur):
                    raise StudentNotFound(student.member_id)
        self._feed.publish()


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._feed: SnapshotFeed[StaffMember] = SnapshotFeed(self.list_all)

    def subscribe(self, on_update: Callable[[list[StaffMember]], None]) -> Unsubscribe:
        return self._feed.subscribe(on_update)

    def list_all(self) -> Sequence[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT staff_id, name, job_role, photo_url, active, work_period
                FROM staff_members
                WHERE active = 1
                ORDER BY name ASC
                """
            )
            out: list[StaffMember] = []
            for r in fetchall(cur):
                period = WorkPeriod(r.get("work_period") or WorkPeriod.FULL.value)
                out.append(
                    StaffMember(
                        member_id=as_str_id(r["staff_id"]),
                        name=r["name"],
                        class_code=period.value,
                        photo_url=r.get("photo_url"),
                        job_role=r.get("job_role") or "",
                        active=bool(r.get("active", True)),
                        work_period=period,
                    )
                )
            return out
