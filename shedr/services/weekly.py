# shedr/services/weekly.py

# Groups sessions into a Monday..Sunday week for calendar rendering.
# Every weekday is present (empty tuple when nothing is scheduled), sessions sorted by start.
# Each session gets a timeline block: top = minutes after midnight, height = duration in minutes.
# Overlaps stay as separate blocks; pixel scaling and severity colours belong to the renderer.

from __future__ import annotations
from typing import Dict, Iterable, List

from shedr.errors import UnknownDayError
from shedr.utils.sessions import DaySchedule, Session, TimelineBlock
from shedr.utils.times import WEEK


def timeline_block(session: Session) -> TimelineBlock:
    top = session.start_minutes
    return TimelineBlock(session=session, top=top, height=session.end_minutes - top)


def build_week(sessions: Iterable[Session]) -> List[DaySchedule]:
    by_day: Dict[str, List[Session]] = {day: [] for day in WEEK}
    for s in sessions:
        if s.day not in by_day:
            raise UnknownDayError(s.day)
        by_day[s.day].append(s)

    week: List[DaySchedule] = []
    for day in WEEK:
        ordered = tuple(sorted(by_day[day], key=lambda s: s.start_time))
        week.append(DaySchedule(day=day, sessions=ordered,
                                blocks=tuple(timeline_block(s) for s in ordered)))
    return week
