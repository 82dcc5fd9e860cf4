# shedr/api/schedule.py

# Schedule API endpoints: thin wrappers that run the engine over sessions sent in the body.
# /status → active session + remaining time; /upcoming → next sessions with lead time.
# /reminders → when to notify ahead of upcoming sessions; /week → 7-day timeline blocks.
# /filter → sessions narrowed by day/level/time band; /suburbs/search → name lookup.
# Nothing is stored between requests; engine errors map to 422.

from __future__ import annotations
from fastapi import APIRouter, HTTPException

from shedr.config import settings
from shedr.errors import ScheduleError
from shedr.schemas import (
    AtInstantRequest, DayOut, FilterRequest, FilterResponse, ReminderOut, RemindersRequest,
    RemindersResponse, SessionModel, SessionsRequest, StatusResponse, SuburbModel,
    SuburbSearchRequest, SuburbSearchResponse, UpcomingOut, UpcomingRequest, UpcomingResponse,
    WeekResponse,
)
from shedr.services.filters import apply_filters
from shedr.services.status import resolve_active
from shedr.services.suburbs import search_suburbs
from shedr.services.upcoming import plan_reminders, rank_upcoming
from shedr.services.weekly import build_week

router = APIRouter()


def _unprocessable(exc: ScheduleError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(exc))


@router.post("/status", response_model=StatusResponse)
async def status(req: AtInstantRequest):
    try:
        active, remaining = resolve_active(req.to_sessions(), req.now)
    except ScheduleError as exc:
        raise _unprocessable(exc) from exc
    return StatusResponse(active=SessionModel.of(active) if active else None, remaining=remaining)


@router.post("/upcoming", response_model=UpcomingResponse)
async def upcoming(req: UpcomingRequest):
    limit = settings.UPCOMING_LIMIT if req.limit is None else req.limit
    try:
        ranked = rank_upcoming(req.to_sessions(), req.now, limit, req.include_next_week)
    except ScheduleError as exc:
        raise _unprocessable(exc) from exc
    return UpcomingResponse(upcoming=[UpcomingOut.of(u) for u in ranked])


@router.post("/reminders", response_model=RemindersResponse)
async def reminders(req: RemindersRequest):
    limit = settings.UPCOMING_LIMIT if req.limit is None else req.limit
    lead = settings.REMINDER_LEAD_MINUTES if req.lead_minutes is None else req.lead_minutes
    try:
        ranked = rank_upcoming(req.to_sessions(), req.now, limit)
    except ScheduleError as exc:
        raise _unprocessable(exc) from exc
    return RemindersResponse(reminders=[ReminderOut.of(r) for r in plan_reminders(ranked, req.now, lead)])


@router.post("/week", response_model=WeekResponse)
async def week(req: SessionsRequest):
    try:
        days = build_week(req.to_sessions())
    except ScheduleError as exc:
        raise _unprocessable(exc) from exc
    return WeekResponse(days=[DayOut.of(d) for d in days])


@router.post("/filter", response_model=FilterResponse)
async def filter_sessions(req: FilterRequest):
    try:
        kept = apply_filters(req.to_sessions(), day=req.day, level=req.level, time_band=req.time_band)
    except ScheduleError as exc:
        raise _unprocessable(exc) from exc
    return FilterResponse(sessions=[SessionModel.of(s) for s in kept])


@router.post("/suburbs/search", response_model=SuburbSearchResponse)
async def suburbs_search(req: SuburbSearchRequest):
    limit = settings.SUBURB_SEARCH_LIMIT if req.limit is None else req.limit
    found = search_suburbs([s.to_suburb() for s in req.suburbs], req.term, limit)
    return SuburbSearchResponse(suburbs=[SuburbModel.of(s) for s in found])
