# shedr/ingest.py

# Adapters that turn raw schedule records into Session / Suburb values for the engine.
# sessions_from_documents flattens schedule documents ({id, suburbId, sessions: [...]}).
# load_sessions_csv / load_suburbs_csv read CSV exports with pandas and normalise headers/times.
# Running the module prints a status + upcoming report for matching suburbs at the local time.

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from typing import Any, Iterable, List, Mapping

import pandas as pd

from shedr.app_logging import configure_logging
from shedr.config import settings
from shedr.errors import MalformedSessionError, MalformedTimeError
from shedr.services.status import resolve_active
from shedr.services.suburbs import search_suburbs
from shedr.services.upcoming import rank_upcoming
from shedr.utils.sessions import Session, Suburb

logger = logging.getLogger(__name__)


# ---------- documents ----------

def sessions_from_documents(documents: Iterable[Mapping[str, Any]], location_id: str | None = None) -> List[Session]:
    """Flatten schedule documents into sessions, optionally only those for one suburb."""
    out: List[Session] = []
    for doc in documents:
        suburb_id = str(doc.get("suburbId", ""))
        if location_id is not None and suburb_id != str(location_id):
            continue
        for raw in doc.get("sessions") or []:
            out.append(Session.from_record(
                id=_field(doc, "id"),
                day=_field(raw, "day"),
                start_time=_field(raw, "startTime"),
                end_time=_field(raw, "endTime"),
                level=_field(raw, "level"),
                location_id=suburb_id,
            ))
    return out


def _field(record: Mapping[str, Any], name: str) -> Any:
    try:
        return record[name]
    except KeyError:
        raise MalformedSessionError(name) from None


# ---------- csv helpers ----------

_SESSION_ALIASES = {
    "id": "schedule_id",
    "suburbid": "suburb_id", "location_id": "suburb_id", "locationid": "suburb_id",
    "dayofweek": "day", "day_of_week": "day",
    "starttime": "start_time", "start": "start_time",
    "endtime": "end_time", "end": "end_time",
    "stage": "level",
}
_SESSION_COLUMNS = ["schedule_id", "suburb_id", "day", "start_time", "end_time", "level"]

_SUBURB_ALIASES = {"suburb_id": "id", "suburb_name": "name", "suburbname": "name", "regionid": "region_id"}
_SUBURB_COLUMNS = ["id", "name", "region_id"]


def _read_csv(path: str) -> pd.DataFrame:
    if not os.path.exists(path):
        raise FileNotFoundError(f"CSV not found: {path}")
    return pd.read_csv(path, dtype=str)


def _normalise(df: pd.DataFrame, aliases: dict[str, str], required: list[str], what: str) -> pd.DataFrame:
    df = df.copy()
    df.columns = [c.strip().lower() for c in df.columns]
    df.rename(columns={k: v for k, v in aliases.items() if k in df.columns and v not in df.columns}, inplace=True)
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{what} CSV is missing columns: {', '.join(missing)}")
    before = len(df)
    df = df.dropna(subset=required)
    if len(df) < before:
        logger.warning("Dropped %d %s rows with empty required fields", before - len(df), what)
    return df


def _ensure_time_str(x: str) -> str:
    """Return HH:MM from 'H:MM' / 'HH:MM:SS'."""
    text = str(x).strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return pd.to_datetime(text, format=fmt).strftime("%H:%M")
        except ValueError:
            continue
    raise MalformedTimeError(x)


def load_sessions_csv(path: str) -> List[Session]:
    df = _normalise(_read_csv(path), _SESSION_ALIASES, _SESSION_COLUMNS, "schedule")
    df["day"] = df["day"].str.strip().str.capitalize()
    df["start_time"] = df["start_time"].map(_ensure_time_str)
    df["end_time"] = df["end_time"].map(_ensure_time_str)

    sessions = [
        Session.from_record(id=r["schedule_id"], day=r["day"], start_time=r["start_time"],
                            end_time=r["end_time"], level=r["level"], location_id=r["suburb_id"])
        for r in df[_SESSION_COLUMNS].to_dict(orient="records")
    ]
    logger.info("Loaded %d sessions from %s", len(sessions), path)
    return sessions


def load_suburbs_csv(path: str) -> List[Suburb]:
    df = _normalise(_read_csv(path), _SUBURB_ALIASES, _SUBURB_COLUMNS, "suburb")
    suburbs = [Suburb(id=r["id"], name=r["name"].strip(), region_id=r["region_id"])
               for r in df[_SUBURB_COLUMNS].to_dict(orient="records")]
    logger.info("Loaded %d suburbs from %s", len(suburbs), path)
    return suburbs


# ---------- report ----------

def report(suburbs: List[Suburb], sessions: List[Session], now: datetime, term: str = "") -> List[str]:
    matches = search_suburbs(suburbs, term, settings.SUBURB_SEARCH_LIMIT) if term else suburbs
    lines: List[str] = []
    for sub in matches:
        own = [s for s in sessions if s.location_id == sub.id]
        active, remaining = resolve_active(own, now)
        if active:
            lines.append(f"{sub.name}: level {active.level} active until {active.end_time} ({remaining} remaining)")
        else:
            lines.append(f"{sub.name}: no load shedding active")
        for u in rank_upcoming(own, now, settings.UPCOMING_LIMIT):
            s = u.session
            lines.append(f"  {s.day} {s.start_time}-{s.end_time} level {s.level}, starts in {u.lead_time}")
    return lines


def main(argv: List[str] | None = None, now: datetime | None = None) -> None:
    configure_logging()
    schedules_csv = settings.SCHEDULES_CSV or ""
    suburbs_csv = settings.SUBURBS_CSV or ""
    if not (schedules_csv and suburbs_csv):
        raise SystemExit("Set SHEDR_SCHEDULES_CSV and SHEDR_SUBURBS_CSV (env or .env).")

    term = " ".join(sys.argv[1:] if argv is None else argv)
    now = now or datetime.now()
    for line in report(load_suburbs_csv(suburbs_csv), load_sessions_csv(schedules_csv), now, term):
        print(line)


if __name__ == "__main__":
    main()
