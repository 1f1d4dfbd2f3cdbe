from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.constants import EDITABLE_RANGE_YEARS, MAX_TIME_INPUT_LENGTH
from .datetime_utils import now_local, parse_iso_date, shift_years
from .formats import TIME_INPUT_DISALLOWED, is_date_string, is_time_string


def sanitize_time_input(raw: Optional[str]) -> str:
    """Keep only digits, ':', 'A', 'P', 'M' and whitespace, then cut to 8 chars.

    Idempotent, so it is applied on every keystroke and again at save time.
    """
    if not raw:
        return ""
    return TIME_INPUT_DISALLOWED.sub("", str(raw))[:MAX_TIME_INPUT_LENGTH]


def is_date_in_range(raw: Optional[str], *, today: Optional[date] = None) -> bool:
    """Strict YYYY-MM-DD within one year before/after `today` (inclusive).

    Only gates edits; stored dates are not re-checked against the moving window.
    """
    if not is_date_string(raw):
        return False

    today = today or now_local().date()
    value = parse_iso_date(raw)
    return shift_years(today, -EDITABLE_RANGE_YEARS) <= value <= shift_years(today, EDITABLE_RANGE_YEARS)


def is_time_format(raw: Optional[str]) -> bool:
    """Exact 12-hour clock match, no sanitization."""
    return is_time_string(raw)
