from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from ..common.formats import is_date_string, is_duration_string, is_time_string
from .model import TimeLogRecord


def is_valid_time_log(candidate: Any) -> bool:
    """Structural check of one record. Total, side-effect free.

    Format only: a duration that disagrees with login/logout still passes.
    """
    if isinstance(candidate, TimeLogRecord):
        candidate = candidate.to_dict()
    if not isinstance(candidate, Mapping):
        return False

    if not is_date_string(candidate.get("date")):
        return False
    if not is_time_string(candidate.get("loginTime")):
        return False

    if "logoutTime" in candidate and not is_time_string(candidate["logoutTime"]):
        return False
    if "duration" in candidate and not is_duration_string(candidate["duration"]):
        return False

    return True


def filter_valid(items: Iterable[Any]) -> List[TimeLogRecord]:
    """Keep only valid entries, as records."""
    valid: List[TimeLogRecord] = []
    for item in items:
        if not is_valid_time_log(item):
            continue
        valid.append(item if isinstance(item, TimeLogRecord) else TimeLogRecord.from_dict(item))
    return valid
