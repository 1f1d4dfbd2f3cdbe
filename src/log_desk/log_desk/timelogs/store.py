from __future__ import annotations

import json
import logging
from typing import Iterable, List

from ..core.constants import CHECKSUM_KEY_SUFFIX, DEFAULT_STORAGE_KEY
from ..core.exceptions import StorageError
from ..storage.base import KeyValueStorage
from .model import TimeLogRecord, dumps_records
from .validator import filter_valid

logger = logging.getLogger(__name__)


class TimeLogStore:
    """Reads/writes the record collection; only valid records get through."""

    def __init__(self, storage: KeyValueStorage, *, key: str = DEFAULT_STORAGE_KEY):
        self._storage = storage
        self._key = key

    def load(self) -> List[TimeLogRecord]:
        try:
            raw = self._storage.get(self._key)
        except StorageError:
            logger.exception("Cannot read time logs")
            return []
        if not raw:
            return []

        try:
            parsed = json.loads(raw)
        except (ValueError, RecursionError):
            logger.error("Corrupted time log data in storage, resetting")
            return self._discard()

        if not isinstance(parsed, list):
            logger.warning("Invalid data structure in storage, resetting")
            return self._discard()

        valid = filter_valid(parsed)
        if len(valid) != len(parsed):
            logger.warning("Removed %d invalid time log entries", len(parsed) - len(valid))
            try:
                self._storage.set(self._key, dumps_records(valid))
            except StorageError:
                logger.exception("Cannot write back cleaned time logs")

        return valid

    def save(self, records: Iterable[TimeLogRecord]) -> bool:
        records = list(records)
        valid = filter_valid(records)
        if len(valid) != len(records):
            logger.warning("Some invalid logs were filtered out before saving")

        try:
            self._storage.set(self._key, dumps_records(valid))
        except StorageError:
            logger.exception("Error saving time logs")
            return False
        return True

    def reset(self) -> bool:
        """Delete the collection and its checksum. The only deletion path."""
        try:
            self._storage.remove(self._key)
            self._storage.remove(f"{self._key}{CHECKSUM_KEY_SUFFIX}")
        except StorageError:
            logger.exception("Error resetting time logs")
            return False
        return True

    def _discard(self) -> List[TimeLogRecord]:
        try:
            self._storage.remove(self._key)
        except StorageError:
            logger.exception("Cannot remove corrupted time logs")
        return []
