from __future__ import annotations

from src.log_desk.log_desk.integrity.guard import IntegrityGuard, generate_checksum
from src.log_desk.log_desk.storage.memory_storage import InMemoryStorage
from src.log_desk.log_desk.timelogs.model import TimeLogRecord

RECORDS = [
    TimeLogRecord(date="2026-02-02", login_time="9:00 AM"),
    TimeLogRecord(date="2026-02-01", login_time="8:45 AM", logout_time="5:15 PM", duration="8h 30m"),
]


def test_checksum_of_empty_collection():
    # "[" = 91, "]" = 93 -> 91 * 31 + 93
    assert generate_checksum([]) == "b62"


def test_checksum_is_deterministic_and_32_bit():
    token = generate_checksum(RECORDS)

    assert token == generate_checksum(list(RECORDS))
    assert -(2**31) <= int(token, 16) < 2**31


def test_checksum_changes_on_add_remove_mutate_and_reorder():
    base = generate_checksum(RECORDS)
    mutated = [RECORDS[0], TimeLogRecord(date="2026-02-01", login_time="8:46 AM", logout_time="5:15 PM", duration="8h 29m")]

    assert generate_checksum(RECORDS[:1]) != base
    assert generate_checksum(RECORDS + [TimeLogRecord(date="2026-01-30", login_time="9:00 AM")]) != base
    assert generate_checksum(mutated) != base
    assert generate_checksum(list(reversed(RECORDS))) != base


def test_first_validation_trusts_and_stores_baseline():
    storage = InMemoryStorage()
    guard = IntegrityGuard(storage)

    assert guard.validate(RECORDS)
    assert storage.get("timeLogs_checksum") == generate_checksum(RECORDS)


def test_mismatch_is_reported_without_touching_stored_token():
    storage = InMemoryStorage({"timeLogs_checksum": "deadbeef"})
    guard = IntegrityGuard(storage)

    assert guard.validate(RECORDS) is False
    assert storage.get("timeLogs_checksum") == "deadbeef"


def test_update_checksum_then_validate():
    storage = InMemoryStorage()
    guard = IntegrityGuard(storage)

    assert guard.update_checksum(RECORDS)
    assert guard.validate(RECORDS)
    assert guard.validate(RECORDS[:1]) is False


def test_custom_key_prefix():
    storage = InMemoryStorage()
    IntegrityGuard(storage, key="work").update_checksum([])

    assert storage.keys() == ["work_checksum"]


def test_empty_stored_token_counts_as_missing():
    storage = InMemoryStorage({"timeLogs_checksum": ""})

    assert IntegrityGuard(storage).validate([])
    assert storage.get("timeLogs_checksum") == "b62"
