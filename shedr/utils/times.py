# shedr/utils/times.py

# Wall-clock helpers for weekly schedules.
# Weekday names <-> indices, cyclic day offsets, "HH:MM" parsing to minutes since midnight.
# Formats durations for display ("1h 5m") and lead times ("1d 3h" once a day is reached).
# No timezone handling: schedule times and "now" are naive local wall-clock values.

from __future__ import annotations
import re
from datetime import datetime

from shedr.errors import MalformedTimeError, UnknownDayError

# Monday-first, matches datetime.weekday()
WEEK = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
# Sunday-first, the index used for day offsets
_SUNDAY_FIRST = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

MINUTES_PER_DAY = 24 * 60

_HHMM = re.compile(r"([0-9]{2}):([0-9]{2})")


def day_index(day: str) -> int:
    """Sunday=0 .. Saturday=6."""
    try:
        return _SUNDAY_FIRST.index(day)
    except ValueError:
        raise UnknownDayError(day) from None


def day_offset(target_day: str, reference_day: str) -> int:
    """Days forward from reference_day to target_day, in [0, 6]. Same day -> 0."""
    return (day_index(target_day) + 7 - day_index(reference_day)) % 7


def weekday_name(instant: datetime) -> str:
    return WEEK[instant.weekday()]


def minutes_since_midnight(value: str) -> int:
    if not isinstance(value, str):
        raise MalformedTimeError(value)
    m = _HHMM.fullmatch(value)
    if not m:
        raise MalformedTimeError(value)
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        raise MalformedTimeError(value, "out of range 00:00-23:59")
    return hours * 60 + minutes


def instant_minutes(instant: datetime) -> int:
    """Floored minute of the day for a datetime (seconds are ignored)."""
    return instant.hour * 60 + instant.minute


def duration_label(total_minutes: int) -> str:
    if total_minutes < 0:
        raise ValueError(f"duration must be non-negative, got {total_minutes}")
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def lead_time_label(total_minutes: int) -> str:
    # minutes are dropped once the lead time reaches a full day
    if total_minutes >= MINUTES_PER_DAY:
        days, rest = divmod(total_minutes, MINUTES_PER_DAY)
        return f"{days}d {rest // 60}h"
    return duration_label(total_minutes)
