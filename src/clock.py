"""Calendar/clock helpers: parse user dates and times, resolve local time.

Timezone rules (DST gaps and overlaps included) are whatever the system
timezone database says via datetime.astimezone(); nothing here second-guesses
it.
"""
from __future__ import annotations
from datetime import date, datetime, time, timezone

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def parse_date(text: str) -> date:
    """Parse YYYY-MM-DD; raises ValueError on anything else."""
    return datetime.strptime(text, DATE_FORMAT).date()


def parse_time(text: str) -> time:
    """Parse HH:MM (24h); raises ValueError on anything else."""
    return datetime.strptime(text, TIME_FORMAT).time()


def local_to_utc(day: date, at: time) -> datetime:
    """Interpret day+time as local wall-clock time and return it in UTC.

    Dates near the ends of the datetime range cannot always be shifted
    through the local offset; that surfaces as ValueError.
    """
    naive = datetime.combine(day, at)
    try:
        return naive.astimezone().astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"{naive.isoformat()} is out of range") from e


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def local_today() -> date:
    return datetime.now().date()
