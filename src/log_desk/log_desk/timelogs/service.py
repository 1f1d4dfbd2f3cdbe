from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional

from ..common.datetime_utils import Clock, SystemClock, parse_iso_date
from ..common.sanitizers import is_date_in_range, is_time_format, sanitize_time_input
from ..core.constants import DEFAULT_SHIFT_MINUTES, INVALID_DURATION
from ..core.enums import DayStatus
from ..core.exceptions import (
    InvalidDateError,
    InvalidTimeFormatError,
    LogoutBeforeLoginError,
    PersistenceError,
    RecordNotFoundError,
)
from ..integrity.guard import IntegrityGuard
from . import messages
from .model import LoadResult, TimeLogRecord, TodayStatus
from .store import TimeLogStore
from .time_codec import calculate_duration, expected_logout, format_time
from .validator import filter_valid

logger = logging.getLogger(__name__)


class TimeLogService:
    """Use cases behind the UI: load, login, logout, edit, reset.

    Stateless between calls; every mutation is load -> change -> save ->
    checksum update, all on the caller's thread.
    """

    def __init__(
        self,
        store: TimeLogStore,
        guard: IntegrityGuard,
        *,
        clock: Optional[Clock] = None,
        shift_minutes: int = DEFAULT_SHIFT_MINUTES,
    ):
        self._store = store
        self._guard = guard
        self._clock = clock or SystemClock()
        self._shift_minutes = int(shift_minutes)

    def _now(self, now: Optional[datetime]) -> datetime:
        return now or self._clock.now()

    def _persist(self, records: List[TimeLogRecord]) -> None:
        records = filter_valid(records)
        if not self._store.save(records):
            raise PersistenceError(messages.SAVE_ERROR)
        self._guard.update_checksum(records)

    def load_records(self) -> LoadResult:
        records = self._store.load()
        integrity_ok = self._guard.validate(records)
        if not integrity_ok:
            logger.warning("Data integrity warning: %d records loaded with checksum mismatch", len(records))
        return LoadResult(records=records, integrity_ok=integrity_ok)

    def record_login(self, *, now: Optional[datetime] = None) -> TimeLogRecord:
        """Create (or replace) today's record with a login-only entry."""
        now = self._now(now)
        today = now.date().isoformat()

        record = TimeLogRecord(date=today, login_time=format_time(now))
        records = [r for r in self._store.load() if r.date != today]
        records.insert(0, record)

        self._persist(records)
        return record

    def record_logout(self, *, now: Optional[datetime] = None) -> Optional[TimeLogRecord]:
        """Close today's open record. Returns None when there is nothing to close."""
        now = self._now(now)
        today = now.date().isoformat()

        records = self._store.load()
        index = next((i for i, r in enumerate(records) if r.date == today), None)
        if index is None or not records[index].is_open:
            return None

        current = records[index]
        logout_time = format_time(now)
        duration = calculate_duration(today, current.login_time, logout_time)
        if duration == INVALID_DURATION:
            logger.warning("Logout %s precedes login %s on %s; duration left empty", logout_time, current.login_time, today)
            duration = None

        updated = current.closed(logout_time=logout_time, duration=duration)
        records[index] = updated
        self._persist(records)
        return updated

    def update_record(
        self,
        index: int,
        *,
        login_time: str,
        logout_time: Optional[str] = None,
        today: Optional[date] = None,
    ) -> TimeLogRecord:
        records = self._store.load()
        if not 0 <= int(index) < len(records):
            raise RecordNotFoundError(messages.RECORD_NOT_FOUND)
        current = records[int(index)]

        login_time = sanitize_time_input(login_time)
        logout_time = sanitize_time_input(logout_time)

        if not is_time_format(login_time):
            raise InvalidTimeFormatError(messages.INVALID_TIME_FORMAT)
        if logout_time and not is_time_format(logout_time):
            raise InvalidTimeFormatError(messages.INVALID_TIME_FORMAT)

        if not is_date_in_range(current.date, today=today or self._clock.now().date()):
            raise InvalidDateError(messages.INVALID_DATE)

        duration = None
        if logout_time:
            duration = calculate_duration(current.date, login_time, logout_time)
            if duration == INVALID_DURATION:
                raise LogoutBeforeLoginError(messages.LOGOUT_BEFORE_LOGIN)

        updated = TimeLogRecord(
            date=current.date,
            login_time=login_time,
            logout_time=logout_time or None,
            duration=duration,
        )
        records[int(index)] = updated
        self._persist(records)
        return updated

    def reset_all(self, *, confirmed: bool = False) -> bool:
        """Wipe every record and the checksum; refused without confirmation."""
        if confirmed is not True:
            return False
        return self._store.reset()

    def get_today_status(self, *, now: Optional[datetime] = None) -> TodayStatus:
        now = self._now(now)
        today = now.date().isoformat()
        record = next((r for r in self._store.load() if r.date == today), None)

        if record is None:
            status = DayStatus.NOT_STARTED
        elif record.is_open:
            status = DayStatus.LOGGED_IN
        else:
            status = DayStatus.COMPLETED

        return TodayStatus(
            date=today,
            current_time=format_time(now),
            login_time=record.login_time if record else None,
            logout_time=record.logout_time if record else None,
            expected_logout=(
                expected_logout(record.login_time, date=today, shift_minutes=self._shift_minutes) if record else None
            ),
            status=status.value,
            duration=(record.duration or "In Progress...") if record else None,
            can_login=record is None,
            can_logout=record is not None and record.is_open,
        )

    def get_history(self) -> list[dict]:
        return [self._to_ui(r) for r in self._store.load()]

    def _to_ui(self, r: TimeLogRecord) -> dict:
        day = parse_iso_date(r.date)
        return {
            **r.to_dict(),
            "day_label": day.strftime("%b ") + str(day.day),
            "weekday": day.strftime("%a"),
            "logout_display": r.logout_time or "In Progress",
            "duration_display": r.duration or "—",
        }
