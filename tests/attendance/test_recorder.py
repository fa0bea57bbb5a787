from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.school_ops.school_ops.attendance.service import AttendanceRecorder
from src.school_ops.school_ops.core.enums import EventKind, RecordOutcome
from src.school_ops.school_ops.core.exceptions import ValidationError
from src.school_ops.school_ops.roster.model import StaffMember, Student

from tests.fakes import InMemoryEventLog


def test_first_scan_is_recorded_with_day_partition():
    log = InMemoryEventLog()
    recorder = AttendanceRecorder(log, window_minutes=5)
    now = datetime(2026, 3, 2, 7, 15, 0)

    outcome = recorder.record(Student(member_id="a", name="Ana", class_code="1A"), now=now)

    assert outcome == RecordOutcome.RECORDED
    [ev] = log.events
    assert ev.day == "2026-03-02"
    assert ev.kind == EventKind.ENTRY
    assert ev.class_code == "1A"
    assert ev.event_id


def test_repeat_scan_inside_window_is_dropped():
    log = InMemoryEventLog()
    recorder = AttendanceRecorder(log, window_minutes=5)
    student = Student(member_id="a", name="Ana", class_code="1A")
    now = datetime(2026, 3, 2, 7, 15, 0)

    recorder.record(student, now=now)
    outcome = recorder.record(student, now=now + timedelta(minutes=4))

    assert outcome == RecordOutcome.TOO_SOON
    assert len(log.events) == 1


def test_scan_after_window_is_recorded():
    log = InMemoryEventLog()
    recorder = AttendanceRecorder(log, window_minutes=5)
    student = Student(member_id="a", name="Ana", class_code="1A")
    now = datetime(2026, 3, 2, 7, 15, 0)

    recorder.record(student, now=now)
    outcome = recorder.record(student, kind=EventKind.EXIT, now=now + timedelta(minutes=6))

    assert outcome == RecordOutcome.RECORDED
    assert [e.kind for e in log.events] == [EventKind.ENTRY, EventKind.EXIT]


def test_staff_logs_carry_no_kind():
    log = InMemoryEventLog()
    recorder = AttendanceRecorder(log, window_minutes=2, default_kind=None)
    member = StaffMember(member_id="s1", name="Rita", class_code="morning")

    recorder.record(member, now=datetime(2026, 3, 2, 12, 0, 0))

    assert log.events[0].kind is None


def test_missing_subject_id_is_rejected():
    recorder = AttendanceRecorder(InMemoryEventLog(), window_minutes=5)

    with pytest.raises(ValidationError):
        recorder.record(Student(member_id=" ", name="?", class_code="1A"))
