from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Trạng thái làm việc của ngày hôm nay (hiển thị trên thẻ trạng thái)."""

    NOT_STARTED = "Not Started"
    LOGGED_IN = "Logged In"
    COMPLETED = "Completed"


class StorageBackend(str, Enum):
    FILE = "file"
    MYSQL = "mysql"
    MEMORY = "memory"
