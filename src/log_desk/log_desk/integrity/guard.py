"""Corruption detector for the stored collection.

The checksum is a 32-bit rolling hash, not a MAC: it catches accidental damage
and casual hand edits between sessions, nothing more. A mismatch is reported,
never enforced.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.constants import CHECKSUM_KEY_SUFFIX, DEFAULT_STORAGE_KEY
from ..core.exceptions import StorageError
from ..storage.base import KeyValueStorage
from ..timelogs.model import TimeLogRecord, dumps_records

logger = logging.getLogger(__name__)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _utf16_units(text: str) -> Iterable[int]:
    raw = text.encode("utf-16-le")
    for i in range(0, len(raw), 2):
        yield raw[i] | (raw[i + 1] << 8)


def generate_checksum(records: Iterable[TimeLogRecord]) -> str:
    """Deterministic, order-sensitive token over the serialized collection."""
    h = 0
    for unit in _utf16_units(dumps_records(records)):
        h = _to_int32((h << 5) - h + unit)
    return format(h, "x")


class IntegrityGuard:
    def __init__(self, storage: KeyValueStorage, *, key: str = DEFAULT_STORAGE_KEY):
        self._storage = storage
        self._checksum_key = f"{key}{CHECKSUM_KEY_SUFFIX}"

    def stored_checksum(self) -> Optional[str]:
        return self._storage.get(self._checksum_key)

    def validate(self, records: list[TimeLogRecord]) -> bool:
        """Compare against the stored token; trust on first use when missing."""
        current = generate_checksum(records)
        try:
            stored = self.stored_checksum()
            if not stored:
                self._storage.set(self._checksum_key, current)
                return True
        except StorageError:
            logger.exception("Cannot verify time log checksum")
            return False

        if stored != current:
            logger.warning("Time log checksum mismatch (stored=%s, current=%s)", stored, current)
            return False
        return True

    def update_checksum(self, records: list[TimeLogRecord]) -> bool:
        try:
            self._storage.set(self._checksum_key, generate_checksum(records))
        except StorageError:
            logger.exception("Cannot update time log checksum")
            return False
        return True
