# shedr/services/filters.py

# Narrows a session list by weekday, severity level and time-of-day band (AND-combined).
# Bands classify on the start hour only: morning [04,12), afternoon [12,18), evening the rest
# (evening wraps past midnight). Unset filters (None / "") are skipped; order is preserved.

from __future__ import annotations
import enum
from typing import Iterable, List, Optional, Union

from shedr.errors import InvalidFilterError
from shedr.utils.sessions import Session
from shedr.utils.times import minutes_since_midnight


class TimeBand(str, enum.Enum):
    morning = "morning"
    afternoon = "afternoon"
    evening = "evening"


def time_band_of(start_time: str) -> TimeBand:
    hour = minutes_since_midnight(start_time) // 60
    if 4 <= hour < 12:
        return TimeBand.morning
    if 12 <= hour < 18:
        return TimeBand.afternoon
    return TimeBand.evening


def _parse_level(level: Union[int, str]) -> int:
    if isinstance(level, bool):
        raise InvalidFilterError("level", level)
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        try:
            return int(level.strip())
        except ValueError:
            raise InvalidFilterError("level", level) from None
    raise InvalidFilterError("level", level)


def _parse_band(band: Union[TimeBand, str]) -> TimeBand:
    try:
        return TimeBand(band)
    except ValueError:
        raise InvalidFilterError("time_band", band) from None


def _unset(value: object) -> bool:
    return value is None or value == ""


def apply_filters(
    sessions: Iterable[Session],
    day: Optional[str] = None,
    level: Optional[Union[int, str]] = None,
    time_band: Optional[Union[TimeBand, str]] = None,
) -> List[Session]:
    # validate up front so a bad filter fails even on an empty session list
    want_level = None if _unset(level) else _parse_level(level)
    want_band = None if _unset(time_band) else _parse_band(time_band)
    want_day = None if _unset(day) else day

    out: List[Session] = []
    for s in sessions:
        if want_day is not None and s.day != want_day:
            continue
        if want_level is not None and s.level != want_level:
            continue
        if want_band is not None and time_band_of(s.start_time) is not want_band:
            continue
        out.append(s)
    return out
