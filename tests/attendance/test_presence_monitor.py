from __future__ import annotations

import pytest

from src.school_ops.school_ops.attendance.service import PresenceService
from src.school_ops.school_ops.core.enums import EducationLevel
from src.school_ops.school_ops.core.exceptions import StoreError
from src.school_ops.school_ops.roster.model import Student

from tests.fakes import InMemoryEventLog, InMemoryRoster, event

DAY = "2026-03-02"


def _setup():
    roster = InMemoryRoster(
        [
            Student(member_id="a", name="Ana", class_code="1A"),
            Student(member_id="b", name="Bruno", class_code="1A"),
            Student(member_id="k", name="Kauã", class_code="Jardim I"),
        ]
    )
    log = InMemoryEventLog([event("a", day=DAY)])
    return roster, log, PresenceService(roster.subscribe, log)


def test_monitor_starts_with_current_snapshots():
    _, _, service = _setup()

    with service.monitor(day=DAY, class_filter="1A") as monitor:
        assert monitor.snapshot.total == 2
        assert monitor.snapshot.present_count == 1


def test_monitor_recomputes_on_new_event():
    _, log, service = _setup()
    seen = []

    monitor = service.monitor(day=DAY, class_filter="1A", on_change=seen.append)
    log.append(event("b", day=DAY, ts=5_000))

    assert monitor.snapshot.present_count == 2
    assert monitor.snapshot.rate == 100
    assert seen[-1] is monitor.snapshot
    monitor.close()


def test_monitor_recomputes_on_roster_change():
    roster, _, service = _setup()
    monitor = service.monitor(day=DAY, class_filter="1A")

    roster.replace_all([Student(member_id="a", name="Ana", class_code="1A")])

    assert monitor.snapshot.total == 1
    assert monitor.snapshot.rate == 100
    monitor.close()


def test_events_for_other_days_do_not_leak_in():
    _, log, service = _setup()
    monitor = service.monitor(day=DAY)

    log.append(event("b", day="2026-03-03", ts=9_000))

    assert [m.member_id for m in monitor.snapshot.present] == ["a"]
    monitor.close()


def test_select_day_moves_event_subscription():
    _, log, service = _setup()
    monitor = service.monitor(day=DAY)

    monitor.select_day("2026-03-03")

    assert log.subscribed_days() == ["2026-03-03"]
    assert monitor.snapshot.present_count == 0
    monitor.close()


def test_level_filter_uses_classifier():
    _, _, service = _setup()

    snapshot = service.snapshot_for(day=DAY, level=EducationLevel.EARLY_CHILDHOOD)

    assert [m.member_id for m in snapshot.absent] == ["k"]
    assert snapshot.total == 1


def test_close_releases_both_subscriptions_and_is_idempotent():
    roster, log, service = _setup()
    monitor = service.monitor(day=DAY)

    monitor.close()
    monitor.close()

    assert roster.subscriber_count == 0
    assert log.subscribed_days() == []


def test_closed_monitor_ignores_later_notifications():
    _, log, service = _setup()
    seen = []
    monitor = service.monitor(day=DAY, on_change=seen.append)
    calls_before = len(seen)
    monitor.close()

    log.append(event("b", day=DAY, ts=7_000))

    assert len(seen) == calls_before
    assert monitor.snapshot.present_count == 1


def test_failed_event_subscription_releases_roster_subscription():
    roster, log, _ = _setup()

    def subscribe_day(day, on_update):
        raise StoreError("database unavailable")

    log.subscribe_day = subscribe_day
    service = PresenceService(roster.subscribe, log)

    with pytest.raises(StoreError):
        service.snapshot_for(day=DAY)

    assert roster.subscriber_count == 0
