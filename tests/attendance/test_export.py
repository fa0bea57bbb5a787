from __future__ import annotations

from src.school_ops.school_ops.attendance.export import presence_csv, presence_csv_filename
from src.school_ops.school_ops.attendance.presence import compute_presence
from src.school_ops.school_ops.roster.model import Student

from tests.fakes import event


def test_csv_has_header_and_one_row_per_member():
    roster = [
        Student(member_id="a", name="Ana", class_code="1A"),
        Student(member_id="b", name="Bruno", class_code="1A"),
    ]
    snapshot = compute_presence(roster, [event("b")], "1A")

    lines = presence_csv(snapshot, "2026-03-02").splitlines()

    assert lines == [
        "Name,Class,Status,Date",
        "Bruno,1A,Present,2026-03-02",
        "Ana,1A,Absent,2026-03-02",
    ]


def test_names_with_commas_are_quoted():
    snapshot = compute_presence([Student(member_id="a", name="Silva, Ana", class_code="1A")], [])

    lines = presence_csv(snapshot, "2026-03-02").splitlines()

    assert lines[1] == '"Silva, Ana",1A,Absent,2026-03-02'


def test_filename_defaults_to_all():
    assert presence_csv_filename("2026-03-02", None) == "presence_2026-03-02_all.csv"
    assert presence_csv_filename("2026-03-02", "1º ANO EFAI") == "presence_2026-03-02_1º_ANO_EFAI.csv"
