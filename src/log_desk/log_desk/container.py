from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .common.datetime_utils import Clock, SystemClock
from .core.constants import DEFAULT_SHIFT_MINUTES, DEFAULT_STORAGE_KEY
from .core.enums import StorageBackend
from .integrity.guard import IntegrityGuard
from .storage.base import KeyValueStorage
from .storage.file_storage import FileStorage
from .storage.memory_storage import InMemoryStorage
from .timelogs.service import TimeLogService
from .timelogs.store import TimeLogStore


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    clock: Clock

    store: TimeLogStore
    guard: IntegrityGuard

    timelog_service: TimeLogService


def build_storage(settings) -> KeyValueStorage:
    backend = StorageBackend(str(getattr(settings, "STORAGE_BACKEND", "file")).lower())

    if backend == StorageBackend.MEMORY:
        return InMemoryStorage()

    if backend == StorageBackend.MYSQL:
        from .database.connection import DBConfig, DatabaseConnection
        from .storage.mysql_storage import MySQLStorage

        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        return MySQLStorage(conn)

    return FileStorage(Path(getattr(settings, "STORAGE_DIR", "data")))


def build_container(*, settings, storage: KeyValueStorage | None = None, clock: Clock | None = None) -> Container:
    storage = storage or build_storage(settings)
    clock = clock or SystemClock()
    key = str(getattr(settings, "STORAGE_KEY", DEFAULT_STORAGE_KEY))

    store = TimeLogStore(storage, key=key)
    guard = IntegrityGuard(storage, key=key)
    timelog_service = TimeLogService(
        store,
        guard,
        clock=clock,
        shift_minutes=int(getattr(settings, "SHIFT_MINUTES", DEFAULT_SHIFT_MINUTES)),
    )

    return Container(
        storage=storage,
        clock=clock,
        store=store,
        guard=guard,
        timelog_service=timelog_service,
    )
