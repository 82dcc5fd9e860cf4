# shedr/services/status.py

# Resolves which session (if any) is active for a location at a given instant.
# Active = same weekday as `now` and start <= now < end (end exclusive, minute resolution).
# Overlapping sessions resolve last-one-wins; the overlap is logged, not raised.
# Returns the remaining-time label alongside the session; caller re-evaluates on its own timer.

from __future__ import annotations
import logging
from datetime import datetime
from typing import Iterable, Optional, Tuple

from shedr.utils.sessions import Session
from shedr.utils.times import duration_label, instant_minutes, weekday_name

logger = logging.getLogger(__name__)


def is_active(session: Session, now: datetime) -> bool:
    if session.day != weekday_name(now):
        return False
    return session.start_minutes <= instant_minutes(now) < session.end_minutes


def resolve_active(sessions: Iterable[Session], now: datetime) -> Tuple[Optional[Session], str]:
    active: Optional[Session] = None
    for s in sessions:
        if not is_active(s, now):
            continue
        if active is not None:
            logger.warning("Overlapping active sessions for %s on %s: %s-%s replaced by %s-%s",
                           s.location_id, s.day, active.start_time, active.end_time,
                           s.start_time, s.end_time)
        active = s

    if active is None:
        return None, ""
    return active, duration_label(active.end_minutes - instant_minutes(now))
