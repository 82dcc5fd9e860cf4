# Unit tests for session filters (day / level / time band) and suburb search.
# Evening wraps past midnight; classification looks at the start hour only.

import pytest

from shedr.errors import InvalidFilterError
from shedr.services.filters import TimeBand, apply_filters, time_band_of
from shedr.services.suburbs import search_suburbs
from shedr.utils.sessions import Session, Suburb

def s(day, start, end, level=2):
    return Session(id="sched-1", day=day, start_time=start, end_time=end, level=level, location_id="sub-1")

SESSIONS = [
    s("Monday", "23:30", "23:59", level=2),
    s("Tuesday", "02:00", "04:00", level=4),
    s("Monday", "10:00", "12:00", level=1),
    s("Wednesday", "12:00", "14:00", level=2),
    s("Monday", "04:00", "06:00", level=3),
    s("Friday", "17:59", "19:00", level=2),
]


def test_no_filters_is_identity():
    assert apply_filters(SESSIONS) == SESSIONS
    assert apply_filters(SESSIONS, day="", level="", time_band="") == SESSIONS

def test_day_filter():
    out = apply_filters(SESSIONS, day="Monday")
    assert out and all(x.day == "Monday" for x in out)
    assert [x.start_time for x in out] == ["23:30", "10:00", "04:00"]
    assert apply_filters(SESSIONS, day="Sunday") == []

def test_level_filter_accepts_numeric_strings():
    assert apply_filters(SESSIONS, level=2) == apply_filters(SESSIONS, level="2")
    assert [x.level for x in apply_filters(SESSIONS, level=4)] == [4]

@pytest.mark.parametrize("bad", ["high", "2.5", True, 2.0, []])
def test_bad_level_raises(bad):
    with pytest.raises(InvalidFilterError):
        apply_filters(SESSIONS, level=bad)

def test_bad_level_raises_on_empty_input():
    with pytest.raises(InvalidFilterError):
        apply_filters([], level="x")

def test_evening_band_wraps_midnight():
    out = apply_filters(SESSIONS, time_band="evening")
    starts = [x.start_time for x in out]
    assert "23:30" in starts and "02:00" in starts
    assert "10:00" not in starts

def test_band_boundaries():
    assert time_band_of("03:59") is TimeBand.evening
    assert time_band_of("04:00") is TimeBand.morning
    assert time_band_of("11:59") is TimeBand.morning
    assert time_band_of("12:00") is TimeBand.afternoon
    assert time_band_of("17:59") is TimeBand.afternoon
    assert time_band_of("18:00") is TimeBand.evening

def test_unknown_band_raises():
    with pytest.raises(InvalidFilterError):
        apply_filters(SESSIONS, time_band="night")

def test_filters_combine():
    out = apply_filters(SESSIONS, day="Monday", level=2, time_band=TimeBand.evening)
    assert [x.start_time for x in out] == ["23:30"]
    assert apply_filters(SESSIONS, day="Monday", time_band="afternoon") == []


SUBURBS = [Suburb(str(i), name, "r1") for i, name in enumerate(
    ["Sandton", "Sandringham", "Soweto", "Randburg", "Sandhurst", "Sandown", "Sandspruit"])]

def test_search_suburbs_case_insensitive_and_limited():
    assert [x.name for x in search_suburbs(SUBURBS, "SAND")] == [
        "Sandton", "Sandringham", "Sandhurst", "Sandown", "Sandspruit"]
    assert [x.name for x in search_suburbs(SUBURBS, "sand", limit=2)] == ["Sandton", "Sandringham"]
    assert [x.name for x in search_suburbs(SUBURBS, "burg")] == ["Randburg"]

def test_search_suburbs_blank_term():
    assert search_suburbs(SUBURBS, "") == []
    assert search_suburbs(SUBURBS, "   ") == []
