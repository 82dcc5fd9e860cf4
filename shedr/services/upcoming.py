# shedr/services/upcoming.py

# Ranks the sessions still to come in the current 7-day cycle, most imminent first.
# Upcoming = later today (start > now) or on a weekday strictly ahead of today (offset 1..6).
# A same-weekday session whose start has passed is dropped, not pushed to next week,
# unless include_next_week=True asks for it at offset 7.
# Also plans client-side reminder instants ahead of each ranked session (delivery is external).

from __future__ import annotations
import logging
from datetime import datetime, time, timedelta
from typing import Iterable, List

from shedr.utils.sessions import Reminder, Session, UpcomingSession
from shedr.utils.times import day_offset, instant_minutes, lead_time_label, weekday_name

logger = logging.getLogger(__name__)


def _start_instant(session: Session, now: datetime, offset: int) -> datetime:
    start = session.start_minutes
    day = now.date() + timedelta(days=offset)
    return datetime.combine(day, time(start // 60, start % 60), tzinfo=now.tzinfo)


def _offset_if_upcoming(session: Session, today: str, now_minutes: int, include_next_week: bool) -> int | None:
    offset = day_offset(session.day, today)
    if offset > 0:
        return offset
    if session.start_minutes > now_minutes:
        return 0
    return 7 if include_next_week else None


def rank_upcoming(
    sessions: Iterable[Session],
    now: datetime,
    limit: int = 3,
    include_next_week: bool = False,
) -> List[UpcomingSession]:
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    today = weekday_name(now)
    now_minutes = instant_minutes(now)

    ranked: list[tuple[int, Session]] = []
    for s in sessions:
        offset = _offset_if_upcoming(s, today, now_minutes, include_next_week)
        if offset is not None:
            ranked.append((offset, s))

    # stable: ties on (offset, start) keep input order
    ranked.sort(key=lambda pair: (pair[0], pair[1].start_time))
    logger.debug("%d upcoming sessions after %s, keeping %d", len(ranked), now, limit)

    out: List[UpcomingSession] = []
    for offset, s in ranked[:limit]:
        starts_at = _start_instant(s, now, offset)
        lead = int((starts_at - now).total_seconds() // 60)
        out.append(UpcomingSession(session=s, starts_at=starts_at, lead_minutes=lead,
                                   lead_time=lead_time_label(lead)))
    return out


def plan_reminders(upcoming: Iterable[UpcomingSession], now: datetime, lead_minutes: int = 30) -> List[Reminder]:
    """Reminder instants `lead_minutes` before each start; ones already in the past are skipped."""
    if lead_minutes < 0:
        raise ValueError(f"lead_minutes must be non-negative, got {lead_minutes}")
    out: List[Reminder] = []
    for u in upcoming:
        notify_at = u.starts_at - timedelta(minutes=lead_minutes)
        if notify_at > now:
            out.append(Reminder(upcoming=u, notify_at=notify_at))
    return out
