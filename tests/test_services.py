from __future__ import annotations

import json
from datetime import datetime, timedelta

import pytest

from src.log_desk.log_desk.core.exceptions import (
    InvalidDateError,
    InvalidTimeFormatError,
    LogoutBeforeLoginError,
    PersistenceError,
    RecordNotFoundError,
)
from src.log_desk.log_desk.integrity.guard import IntegrityGuard, generate_checksum
from src.log_desk.log_desk.storage.memory_storage import InMemoryStorage
from src.log_desk.log_desk.timelogs.model import TimeLogRecord
from src.log_desk.log_desk.timelogs.service import TimeLogService
from src.log_desk.log_desk.timelogs.store import TimeLogStore


def _stored(storage) -> list[dict]:
    return json.loads(storage.get("timeLogs"))


def test_login_creates_today_record_and_checksum(service, storage, fixed_now):
    record = service.record_login(now=fixed_now)

    assert record == TimeLogRecord(date="2026-02-02", login_time="8:30 AM")
    assert _stored(storage) == [{"date": "2026-02-02", "loginTime": "8:30 AM"}]
    assert storage.get("timeLogs_checksum") == generate_checksum([record])


def test_login_replaces_today_and_puts_it_first(service, storage, fixed_now):
    service.record_login(now=fixed_now - timedelta(days=1))
    service.record_login(now=fixed_now)
    service.record_login(now=fixed_now + timedelta(minutes=15))

    assert [r["date"] for r in _stored(storage)] == ["2026-02-02", "2026-02-01"]
    assert _stored(storage)[0]["loginTime"] == "8:45 AM"


def test_login_then_logout_same_day(service, clock, fixed_now):
    service.record_login()
    clock.current = fixed_now + timedelta(hours=8, minutes=30, seconds=20)

    record = service.record_logout()

    assert record.login_time == "8:30 AM"
    assert record.logout_time == "5:00 PM"
    assert record.duration == "8h 30m"
    assert service.load_records().integrity_ok


def test_logout_without_open_record_is_noop(service, storage, fixed_now):
    assert service.record_logout(now=fixed_now) is None
    assert storage.get("timeLogs") is None

    service.record_login(now=fixed_now)
    service.record_logout(now=fixed_now + timedelta(hours=1))
    before = storage.get("timeLogs")

    assert service.record_logout(now=fixed_now + timedelta(hours=2)) is None
    assert storage.get("timeLogs") == before


def test_logout_before_edited_login_leaves_duration_empty(service, fixed_now):
    service.record_login(now=fixed_now)
    service.update_record(0, login_time="11:00 AM", today=fixed_now.date())

    record = service.record_logout(now=fixed_now + timedelta(hours=1))

    assert record.logout_time == "9:30 AM"
    assert record.duration is None


def test_update_record_sanitizes_and_recomputes_duration(service, fixed_now):
    service.record_login(now=fixed_now)

    record = service.update_record(0, login_time="9:00 AM<b>", logout_time="5:30 PM!!", today=fixed_now.date())

    assert record == TimeLogRecord(date="2026-02-02", login_time="9:00 AM", logout_time="5:30 PM", duration="8h 30m")
    assert service.load_records().records == [record]


def test_update_record_can_clear_logout(service, fixed_now):
    service.record_login(now=fixed_now)
    service.record_logout(now=fixed_now + timedelta(hours=2))

    record = service.update_record(0, login_time="8:30 AM", logout_time="", today=fixed_now.date())

    assert record.logout_time is None
    assert record.duration is None


@pytest.mark.parametrize(
    "login, logout, error",
    [
        ("9:00", None, InvalidTimeFormatError),
        ("9:00 AM", "17:30", InvalidTimeFormatError),
        ("5:30 PM", "9:00 AM", LogoutBeforeLoginError),
    ],
)
def test_update_record_rejections_do_not_mutate(service, storage, fixed_now, login, logout, error):
    service.record_login(now=fixed_now)
    before = storage.get("timeLogs")

    with pytest.raises(error):
        service.update_record(0, login_time=login, logout_time=logout, today=fixed_now.date())
    assert storage.get("timeLogs") == before


def test_update_record_outside_date_window(storage, service, fixed_now):
    storage.set("timeLogs", json.dumps([{"date": "2020-01-01", "loginTime": "9:00 AM"}]))

    with pytest.raises(InvalidDateError) as exc:
        service.update_record(0, login_time="8:00 AM", today=fixed_now.date())
    assert exc.value.reason == "date_range"


def test_update_record_unknown_index(service):
    with pytest.raises(RecordNotFoundError):
        service.update_record(3, login_time="9:00 AM")


def test_storage_failure_raises_persistence_error(fixed_now):
    storage = InMemoryStorage(quota_bytes=10)
    svc = TimeLogService(TimeLogStore(storage), IntegrityGuard(storage))

    with pytest.raises(PersistenceError):
        svc.record_login(now=fixed_now)
    assert storage.get("timeLogs") is None


def test_tampered_storage_loads_with_warning(service, storage, fixed_now):
    service.record_login(now=fixed_now)
    storage.set("timeLogs", json.dumps([{"date": "2026-02-02", "loginTime": "7:00 AM"}]))

    result = service.load_records()

    assert result.integrity_ok is False
    assert result.records == [TimeLogRecord(date="2026-02-02", login_time="7:00 AM")]


def test_reset_requires_confirmation(service, storage, fixed_now):
    service.record_login(now=fixed_now)

    assert service.reset_all() is False
    assert service.reset_all(confirmed="yes") is False
    assert storage.get("timeLogs") is not None


def test_reset_clears_everything_and_rebaselines(service, storage, fixed_now):
    for days in range(3):
        service.record_login(now=fixed_now - timedelta(days=days))

    assert service.reset_all(confirmed=True)
    assert storage.keys() == []

    result = service.load_records()
    assert result.records == []
    assert result.integrity_ok
    assert storage.get("timeLogs_checksum") == generate_checksum([])


def test_today_status_lifecycle(service, fixed_now):
    status = service.get_today_status(now=fixed_now)
    assert status.status == "Not Started"
    assert status.can_login and not status.can_logout
    assert status.expected_logout is None

    service.record_login(now=fixed_now)
    status = service.get_today_status(now=fixed_now + timedelta(minutes=1))
    assert status.status == "Logged In"
    assert status.current_time == "8:31 AM"
    assert status.expected_logout == "5:00 PM"
    assert status.duration == "In Progress..."
    assert not status.can_login and status.can_logout

    service.record_logout(now=datetime(2026, 2, 2, 17, 0))
    status = service.get_today_status(now=datetime(2026, 2, 2, 17, 1))
    assert status.status == "Completed"
    assert status.duration == "8h 30m"


def test_history_rows(service, fixed_now):
    service.record_login(now=fixed_now)

    rows = service.get_history()

    assert rows[0]["date"] == "2026-02-02"
    assert rows[0]["weekday"] == "Mon"
    assert rows[0]["day_label"] == "Feb 2"
    assert rows[0]["logout_display"] == "In Progress"
    assert rows[0]["duration_display"] == "—"


def test_editable_window_follows_clock(service, clock, fixed_now):
    service.record_login(now=fixed_now)
    clock.current = datetime(2027, 3, 1, 9, 0)

    with pytest.raises(InvalidDateError):
        service.update_record(0, login_time="9:00 AM")
    assert service.load_records().records[0].date == "2026-02-02"
