"""Canonical format predicates for stored and edited time-log fields.

Both the record validator and the input sanitizer go through these, so what
the sanitizer lets through and what the validator accepts cannot drift apart.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_12H_PATTERN = re.compile(r"(0?[1-9]|1[0-2]):[0-5][0-9] [AP]M")
DURATION_PATTERN = re.compile(r"[0-9]+h [0-9]+m")

# Characters a time field may contain while being typed.
TIME_INPUT_DISALLOWED = re.compile(r"[^0-9:APM\s]")


def is_date_string(value: Any) -> bool:
    """YYYY-MM-DD shape and a real calendar date."""
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def is_time_string(value: Any) -> bool:
    return isinstance(value, str) and TIME_12H_PATTERN.fullmatch(value) is not None


def is_duration_string(value: Any) -> bool:
    return isinstance(value, str) and DURATION_PATTERN.fullmatch(value) is not None
