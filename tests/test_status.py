# Unit tests for the active-session resolver.
# Active only on the matching weekday, start inclusive / end exclusive at minute resolution.
# Overlapping active sessions resolve to the last one and log a warning.

import logging
from datetime import datetime

from shedr.services.status import is_active, resolve_active
from shedr.utils.sessions import Session

MONDAY = (2024, 1, 1)

def s(day, start, end, level=2, id="sched-1", loc="sub-1"):
    return Session(id=id, day=day, start_time=start, end_time=end, level=level, location_id=loc)

def monday(hh, mm=0, ss=0):
    return datetime(*MONDAY, hh, mm, ss)


def test_active_session_with_remaining_label():
    evening = s("Monday", "18:00", "20:00")
    active, remaining = resolve_active([evening], monday(19))
    assert active == evening
    assert remaining == "1h 0m"

def test_end_is_exclusive():
    active, remaining = resolve_active([s("Monday", "18:00", "20:00")], monday(20))
    assert active is None
    assert remaining == ""

def test_start_is_inclusive_and_seconds_are_floored():
    sess = s("Monday", "18:00", "20:00")
    active, remaining = resolve_active([sess], monday(18, 0, 0))
    assert active == sess and remaining == "2h 0m"
    active, remaining = resolve_active([sess], monday(19, 59, 59))
    assert active == sess and remaining == "1m"

def test_never_returns_other_weekday():
    sessions = [s(d, "00:00", "23:59") for d in ("Sunday", "Tuesday", "Wednesday")]
    assert resolve_active(sessions, monday(12)) == (None, "")
    assert not is_active(sessions[0], monday(12))

def test_empty_input():
    assert resolve_active([], monday(12)) == (None, "")

def test_overlap_last_wins_and_warns(caplog):
    first = s("Monday", "18:00", "20:00", level=2)
    second = s("Monday", "19:00", "21:00", level=4, id="sched-2")
    with caplog.at_level(logging.WARNING, logger="shedr.services.status"):
        active, remaining = resolve_active([first, second], monday(19, 30))
    assert active == second
    assert remaining == "1h 30m"
    assert "Overlapping" in caplog.text

def test_accepts_generator_input():
    active, _ = resolve_active((x for x in [s("Monday", "08:00", "10:00")]), monday(9))
    assert active is not None and active.start_time == "08:00"
