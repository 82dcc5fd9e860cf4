# shedr/errors.py

# Error types raised by the schedule engine.
# Everything derives from ScheduleError (a ValueError) so the API layer can map it to 422.
# Empty results (nothing active, nothing upcoming, no filter match) are never errors.

from __future__ import annotations


class ScheduleError(ValueError):
    pass


class MalformedTimeError(ScheduleError):
    def __init__(self, value: object, reason: str = "expected 24-hour HH:MM"):
        self.value = value
        super().__init__(f"Malformed time {value!r}: {reason}")


class InvalidFilterError(ScheduleError):
    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} filter: {value!r}")


class UnknownDayError(ScheduleError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown weekday {value!r}")


class MalformedSessionError(ScheduleError):
    def __init__(self, field: str, value: object = None, reason: str = "missing"):
        self.field = field
        self.value = value
        super().__init__(f"Malformed session {field}: {reason}" + ("" if value is None else f" ({value!r})"))
