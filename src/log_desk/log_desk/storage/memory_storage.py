from __future__ import annotations

from typing import Dict, Optional

from ..core.exceptions import StorageQuotaExceededError
from .base import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage with an optional byte quota (like a browser's)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None, *, quota_bytes: Optional[int] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._quota_bytes = quota_bytes

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self._quota_bytes is not None:
            others = sum(len(k) + len(v) for k, v in self._data.items() if k != key)
            if others + len(key) + len(value) > self._quota_bytes:
                raise StorageQuotaExceededError(f"Quota exceeded while writing {key!r}")
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)
