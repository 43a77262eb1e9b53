from __future__ import annotations

from datetime import date, datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now(timezone.utc)


def utc_day(value: datetime) -> date:
    """Calendar day of a timestamp, taken in UTC.

    Naive datetimes are treated as already being UTC.
    """
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(timezone.utc).date()


def to_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
