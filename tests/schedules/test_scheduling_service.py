from __future__ import annotations

import pytest

from src.school_ops.school_ops.core.enums import Period
from src.school_ops.school_ops.core.exceptions import StoreError, ValidationError
from src.school_ops.school_ops.schedules.model import Appointment, MonthCursor
from src.school_ops.school_ops.schedules.service import SchedulingService

from tests.fakes import InMemoryAppointmentStore


def _draft(time="08:00", date="2026-03-10", subject_id="st-1", **kw) -> Appointment:
    return Appointment(
        appointment_id="",
        subject_id=subject_id,
        subject_name=kw.pop("subject_name", "Ana"),
        date=date,
        time=time,
        period=kw.pop("period", Period.MORNING),
        description=kw.pop("description", "Fonoaudiologia"),
        **kw,
    )


def _service():
    store = InMemoryAppointmentStore()
    return store, SchedulingService(store, cursor=MonthCursor(2026, 2))


def test_list_for_day_is_sorted_by_time():
    _, svc = _service()
    for t in ("14:00", "08:30", "08:00"):
        svc.create(_draft(time=t))

    assert [a.time for a in svc.list_for_day("2026-03-10")] == ["08:00", "08:30", "14:00"]


def test_create_round_trip_assigns_id():
    _, svc = _service()

    created = svc.create(_draft())

    [listed] = svc.list_for_day("2026-03-10")
    assert created.appointment_id
    assert listed.appointment_id == created.appointment_id
    assert (listed.subject_id, listed.date, listed.time, listed.period) == ("st-1", "2026-03-10", "08:00", Period.MORNING)
    assert listed.created_at > 0


def test_overlapping_appointments_are_allowed():
    _, svc = _service()

    svc.create(_draft())
    svc.create(_draft())

    assert len(svc.list_for_day("2026-03-10")) == 2


@pytest.mark.parametrize(
    "draft",
    [
        _draft(subject_id=""),
        _draft(date=""),
        _draft(time=""),
        _draft(time="8:00"),
        _draft(time="24:10"),
        _draft(date="10/03/2026"),
        _draft(period="Evening"),
    ],
)
def test_invalid_drafts_are_rejected(draft):
    store, svc = _service()

    with pytest.raises(ValidationError):
        svc.create(draft)
    assert svc.list_for_day("2026-03-10") == []


def test_period_given_as_label_is_accepted():
    _, svc = _service()

    created = svc.create(_draft(period="Off-shift"))

    assert created.period == Period.OFF_SHIFT


def test_delete_removes_and_repeat_delete_does_not_raise():
    _, svc = _service()
    created = svc.create(_draft())

    assert svc.delete(created.appointment_id) is True
    assert svc.list_for_day("2026-03-10") == []
    assert svc.delete(created.appointment_id) is False


def test_store_failure_propagates_and_leaves_listing_untouched():
    store, svc = _service()
    kept = svc.create(_draft())

    store.fail_next = StoreError("permission denied")
    with pytest.raises(StoreError):
        svc.create(_draft(time="09:00"))

    store.fail_next = StoreError("network down")
    with pytest.raises(StoreError):
        svc.delete(kept.appointment_id)

    assert [a.appointment_id for a in svc.list_for_day("2026-03-10")] == [kept.appointment_id]


def test_month_view_counts_appointments():
    _, svc = _service()
    svc.create(_draft(date="2026-03-10"))
    svc.create(_draft(date="2026-03-10", time="10:00"))
    svc.create(_draft(date="2026-03-31"))

    view = svc.month_view()
    counts = {c.date: c.appointment_count for c in view.cells if c is not None}

    assert counts["2026-03-10"] == 2
    assert counts["2026-03-31"] == 1
    assert counts["2026-03-01"] == 0


def test_month_navigation_state():
    _, svc = _service()

    assert svc.previous_month() == MonthCursor(2026, 1)
    svc.go_to(2025, 11)
    assert svc.next_month() == MonthCursor(2026, 0)
    with pytest.raises(ValidationError):
        svc.go_to(2026, 12)


def test_close_unsubscribes_from_store():
    store, svc = _service()

    svc.close()
    svc.close()

    assert store.subscriber_count == 0


@pytest.mark.parametrize("year,month0", [(0, 0), (10000, 0), (2026, -1)])
def test_go_to_rejects_months_outside_the_calendar(year, month0):
    _, svc = _service()

    with pytest.raises(ValidationError):
        svc.go_to(year, month0)

    assert svc.cursor == MonthCursor(2026, 2)
    assert svc.month_view().cursor == MonthCursor(2026, 2)


def test_navigation_past_the_last_supported_year_is_rejected():
    _, svc = _service()
    svc.go_to(9999, 11)

    with pytest.raises(ValidationError):
        svc.next_month()

    assert svc.cursor == MonthCursor(9999, 11)


def test_resolve_month_does_not_move_the_displayed_month():
    _, svc = _service()

    assert svc.resolve_month(2030, 5, "next") == MonthCursor(2030, 6)
    assert svc.resolve_month(step="prev") == MonthCursor(2026, 1)
    assert svc.cursor == MonthCursor(2026, 2)
    with pytest.raises(ValidationError):
        svc.resolve_month(step="sideways")
