"""12-hour clock conversions and elapsed-time arithmetic.

Nothing here raises past the module boundary: malformed input yields the
``"Invalid"`` display value.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from ..common.formats import is_date_string, is_time_string
from ..core.constants import DEFAULT_SHIFT_MINUTES, INVALID_DURATION


def to_24_hour(time12h: str) -> str:
    """'9:05 PM' -> '21:05:00'. '12:xx AM' is midnight, '12:xx PM' is noon."""
    if not is_time_string(time12h):
        return INVALID_DURATION

    clock, modifier = time12h.split(" ")
    hours, minutes = clock.split(":")

    hour = int(hours)
    if hour == 12:
        hour = 0
    if modifier == "PM":
        hour += 12
    return f"{hour:02d}:{minutes}:00"


def _instant(date: str, time12h: str) -> datetime:
    if not is_date_string(date) or not is_time_string(time12h):
        raise ValueError(f"Invalid date/time: {date!r} {time12h!r}")
    return datetime.strptime(f"{date}T{to_24_hour(time12h)}", "%Y-%m-%dT%H:%M:%S")


def format_time(value: datetime) -> str:
    """en-US numeric hour style: '9:05 AM', '12:00 PM'."""
    hour = value.hour % 12 or 12
    modifier = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {modifier}"


def format_duration(delta: timedelta) -> str:
    total_minutes = int(delta.total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


def calculate_duration(date: str, login_time: str, logout_time: str) -> str:
    try:
        login = _instant(date, login_time)
        logout = _instant(date, logout_time)
    except (TypeError, ValueError, AttributeError):
        return INVALID_DURATION

    if logout < login:
        return INVALID_DURATION
    return format_duration(logout - login)


def expected_logout(login_time: str, *, date: str = "2000-01-01", shift_minutes: int = DEFAULT_SHIFT_MINUTES) -> str:
    """Login + shift length, back in 12-hour form. Pure projection."""
    try:
        login = _instant(date, login_time)
    except (TypeError, ValueError, AttributeError):
        return INVALID_DURATION
    return format_time(login + timedelta(minutes=int(shift_minutes)))
