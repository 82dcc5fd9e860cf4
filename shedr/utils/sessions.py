# shedr/utils/sessions.py

# Value types shared by the schedule services.
# A Session is one recurring weekly outage window for a location (day + start/end + level).
# UpcomingSession / TimelineBlock / DaySchedule / Reminder are derived per call, never stored.
# Session.from_record validates raw fields; plain construction trusts its inputs.

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from shedr.errors import MalformedSessionError, MalformedTimeError
from shedr.utils.times import day_index, minutes_since_midnight


@dataclass(frozen=True)
class Session:
    id: str            # owning schedule document, shared by its sessions
    day: str           # "Monday".."Sunday"
    start_time: str    # "HH:MM"
    end_time: str      # "HH:MM", exclusive
    level: int
    location_id: str

    @property
    def start_minutes(self) -> int:
        return minutes_since_midnight(self.start_time)

    @property
    def end_minutes(self) -> int:
        return minutes_since_midnight(self.end_time)

    @classmethod
    def from_record(cls, *, id: str, day: str, start_time: str, end_time: str,
                    level: int, location_id: str) -> "Session":
        day_index(day)
        start = minutes_since_midnight(start_time)
        end = minutes_since_midnight(end_time)
        if start >= end:
            raise MalformedTimeError(f"{start_time}-{end_time}", "start must be before end on the same day")
        return cls(id=str(id), day=day, start_time=start_time, end_time=end_time,
                   level=_parse_level(level), location_id=str(location_id))


def _parse_level(level: object) -> int:
    # bools and floats like 2.5 would coerce silently through int()
    if isinstance(level, bool) or isinstance(level, float) and not level.is_integer():
        raise MalformedSessionError("level", level, "not an integer")
    try:
        return int(level)
    except (TypeError, ValueError):
        raise MalformedSessionError("level", level, "not an integer") from None


@dataclass(frozen=True)
class Suburb:
    id: str
    name: str
    region_id: str


@dataclass(frozen=True)
class UpcomingSession:
    session: Session
    starts_at: datetime
    lead_minutes: int
    lead_time: str


@dataclass(frozen=True)
class TimelineBlock:
    session: Session
    top: int      # minutes after midnight
    height: int   # minutes


@dataclass(frozen=True)
class DaySchedule:
    day: str
    sessions: Tuple[Session, ...]
    blocks: Tuple[TimelineBlock, ...]


@dataclass(frozen=True)
class Reminder:
    upcoming: UpcomingSession
    notify_at: datetime
