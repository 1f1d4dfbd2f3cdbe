from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Mapping, Optional


@dataclass(frozen=True)
class TimeLogRecord:
    """Thực thể miền (domain): Bản ghi giờ làm của một ngày."""

    date: str
    login_time: str
    logout_time: Optional[str] = None
    duration: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.logout_time is None

    def to_dict(self) -> Dict[str, str]:
        """Stored form; absent optional fields are omitted, key order is fixed."""
        data = {"date": self.date, "loginTime": self.login_time}
        if self.logout_time is not None:
            data["logoutTime"] = self.logout_time
        if self.duration is not None:
            data["duration"] = self.duration
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TimeLogRecord":
        return cls(
            date=data["date"],
            login_time=data["loginTime"],
            logout_time=data.get("logoutTime"),
            duration=data.get("duration"),
        )

    def closed(self, *, logout_time: str, duration: Optional[str]) -> "TimeLogRecord":
        return replace(self, logout_time=logout_time, duration=duration)


@dataclass(frozen=True)
class LoadResult:
    records: list[TimeLogRecord]
    integrity_ok: bool


@dataclass(frozen=True)
class TodayStatus:
    """Read-model cho thẻ trạng thái hôm nay (không ghi storage)."""

    date: str
    current_time: str
    login_time: Optional[str]
    logout_time: Optional[str]
    expected_logout: Optional[str]
    status: str
    duration: Optional[str]
    can_login: bool
    can_logout: bool


def dumps_records(records: Iterable[Any]) -> str:
    """Compact JSON text of the collection, as written to storage."""
    items = [r.to_dict() if isinstance(r, TimeLogRecord) else r for r in records]
    return json.dumps(items, separators=(",", ":"), ensure_ascii=False)
