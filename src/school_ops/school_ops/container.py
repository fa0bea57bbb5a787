from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceEventRepository
from .attendance.service import AttendanceRecorder, PresenceService
from .core import constants
from .database.connection import DBConfig, DatabaseConnection
from .roster.classifier import ClassLevelClassifier
from .roster.mysql_roster_repository import MySQLStaffRepository, MySQLStudentRepository
from .roster.service import AEERosterService
from .schedules.mysql_appointment_store import MySQLAppointmentStore
from .schedules.service import SchedulingService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    students_repo: MySQLStudentRepository
    staff_repo: MySQLStaffRepository
    student_events_repo: MySQLAttendanceEventRepository
    staff_events_repo: MySQLAttendanceEventRepository
    appointment_store: MySQLAppointmentStore

    classifier: ClassLevelClassifier
    aee_service: AEERosterService
    student_recorder: AttendanceRecorder
    staff_recorder: AttendanceRecorder
    student_presence: PresenceService
    staff_presence: PresenceService
    scheduling_service: SchedulingService


def build_container(*, db_config: dict, settings: object | None = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    students_repo = MySQLStudentRepository(conn)
    staff_repo = MySQLStaffRepository(conn)
    student_events_repo = MySQLAttendanceEventRepository(conn, table="attendance_logs")
    staff_events_repo = MySQLAttendanceEventRepository(conn, table="staff_attendance_logs")
    appointment_store = MySQLAppointmentStore(conn)

    classifier = ClassLevelClassifier(
        early_childhood=getattr(settings, "EARLY_CHILDHOOD_CLASSES", constants.EARLY_CHILDHOOD_CLASSES),
        early_elementary=getattr(settings, "EARLY_ELEMENTARY_CLASSES", constants.EARLY_ELEMENTARY_CLASSES),
        late_elementary=getattr(settings, "LATE_ELEMENTARY_CLASSES", constants.LATE_ELEMENTARY_CLASSES),
        secondary=getattr(settings, "SECONDARY_CLASSES", constants.SECONDARY_CLASSES),
    )

    aee_service = AEERosterService(students_repo, classifier=classifier)
    student_recorder = AttendanceRecorder(
        student_events_repo,
        window_minutes=int(getattr(settings, "STUDENT_SCAN_WINDOW_MINUTES", constants.STUDENT_SCAN_WINDOW_MINUTES)),
    )
    # Staff logs carry no entry/exit tag.
    staff_recorder = AttendanceRecorder(
        staff_events_repo,
        window_minutes=int(getattr(settings, "STAFF_SCAN_WINDOW_MINUTES", constants.STAFF_SCAN_WINDOW_MINUTES)),
        default_kind=None,
    )
    student_presence = PresenceService(students_repo.subscribe, student_events_repo, classifier=classifier)
    staff_presence = PresenceService(staff_repo.subscribe, staff_events_repo, classifier=classifier)
    scheduling_service = SchedulingService(appointment_store)

    return Container(
        conn=conn,
        students_repo=students_repo,
        staff_repo=staff_repo,
        student_events_repo=student_events_repo,
        staff_events_repo=staff_events_repo,
        appointment_store=appointment_store,
        classifier=classifier,
        aee_service=aee_service,
        student_recorder=student_recorder,
        staff_recorder=staff_recorder,
        student_presence=student_presence,
        staff_presence=staff_presence,
        scheduling_service=scheduling_service,
    )
