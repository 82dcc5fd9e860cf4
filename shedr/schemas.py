# shedr/schemas.py

# Pydantic schemas for API request/response models.
# The wire shape is camelCase throughout, matching the schedule documents (startTime, locationId);
# snake_case names are still accepted on input.

from __future__ import annotations
from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from shedr.utils.sessions import DaySchedule, Reminder, Session, Suburb, UpcomingSession


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SessionModel(CamelModel):
    id: str
    day: str
    start_time: str
    end_time: str
    level: int
    location_id: str

    def to_session(self) -> Session:
        return Session.from_record(id=self.id, day=self.day, start_time=self.start_time,
                                   end_time=self.end_time, level=self.level, location_id=self.location_id)

    @classmethod
    def of(cls, s: Session) -> "SessionModel":
        return cls(id=s.id, day=s.day, start_time=s.start_time, end_time=s.end_time,
                   level=s.level, location_id=s.location_id)


class SuburbModel(CamelModel):
    id: str
    name: str
    region_id: str

    def to_suburb(self) -> Suburb:
        return Suburb(id=self.id, name=self.name, region_id=self.region_id)

    @classmethod
    def of(cls, sub: Suburb) -> "SuburbModel":
        return cls(id=sub.id, name=sub.name, region_id=sub.region_id)


# ---------- requests ----------

class SessionsRequest(CamelModel):
    sessions: List[SessionModel] = []

    def to_sessions(self) -> List[Session]:
        return [s.to_session() for s in self.sessions]


class AtInstantRequest(SessionsRequest):
    now: datetime


class UpcomingRequest(AtInstantRequest):
    limit: Optional[int] = Field(default=None, ge=0)
    include_next_week: bool = False


class RemindersRequest(AtInstantRequest):
    limit: Optional[int] = Field(default=None, ge=0)
    lead_minutes: Optional[int] = Field(default=None, ge=0)


class FilterRequest(SessionsRequest):
    day: Optional[str] = None
    # strict so true / 2.0 are rejected instead of coerced to a level
    level: Optional[Union[StrictInt, StrictStr]] = None
    time_band: Optional[str] = None


class SuburbSearchRequest(CamelModel):
    suburbs: List[SuburbModel] = []
    term: str = ""
    limit: Optional[int] = Field(default=None, ge=0)


# ---------- responses ----------

class StatusResponse(CamelModel):
    active: Optional[SessionModel]
    remaining: str


class UpcomingOut(CamelModel):
    session: SessionModel
    starts_at: datetime
    lead_minutes: int
    lead_time: str

    @classmethod
    def of(cls, u: UpcomingSession) -> "UpcomingOut":
        return cls(session=SessionModel.of(u.session), starts_at=u.starts_at,
                   lead_minutes=u.lead_minutes, lead_time=u.lead_time)


class UpcomingResponse(CamelModel):
    upcoming: List[UpcomingOut]


class ReminderOut(CamelModel):
    upcoming: UpcomingOut
    notify_at: datetime

    @classmethod
    def of(cls, r: Reminder) -> "ReminderOut":
        return cls(upcoming=UpcomingOut.of(r.upcoming), notify_at=r.notify_at)


class RemindersResponse(CamelModel):
    reminders: List[ReminderOut]


class BlockOut(CamelModel):
    session: SessionModel
    top: int
    height: int


class DayOut(CamelModel):
    day: str
    blocks: List[BlockOut]

    @classmethod
    def of(cls, d: DaySchedule) -> "DayOut":
        return cls(day=d.day, blocks=[BlockOut(session=SessionModel.of(b.session), top=b.top, height=b.height)
                                      for b in d.blocks])


class WeekResponse(CamelModel):
    days: List[DayOut]


class FilterResponse(CamelModel):
    sessions: List[SessionModel]


class SuburbSearchResponse(CamelModel):
    suburbs: List[SuburbModel]
