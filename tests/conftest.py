from __future__ import annotations

from datetime import datetime

import pytest

from src.log_desk.log_desk.integrity.guard import IntegrityGuard
from src.log_desk.log_desk.storage.memory_storage import InMemoryStorage
from src.log_desk.log_desk.timelogs.service import TimeLogService
from src.log_desk.log_desk.timelogs.store import TimeLogStore


class FixedClock:
    def __init__(self, now: datetime):
        self.current = now

    def now(self) -> datetime:
        return self.current


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 15)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def service(storage, clock) -> TimeLogService:
    return TimeLogService(TimeLogStore(storage), IntegrityGuard(storage), clock=clock)
