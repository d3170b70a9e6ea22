from __future__ import annotations

import math
from calendar import monthrange
from datetime import date, datetime, timedelta, timezone
from typing import Iterator, Union
from zoneinfo import ZoneInfo

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def as_date(value: DateLike) -> date:
    """Coerce a date, datetime or ``YYYY-MM-DD`` (ISO datetime tolerated) into a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value).strip()[:10])


def now_local(tz: str) -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(ZoneInfo(tz))


def today_local(tz: str) -> date:
    return now_local(tz).date()


def to_utc_iso(instant: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    return instant.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def week_of_month(day: date) -> int:
    """1-based week number used by the Saturday policies: ceil(day / 7)."""
    return math.ceil(day.day / 7)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Inclusive range of calendar days."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def month_days(year: int, month: int) -> list[date]:
    last = monthrange(year, month)[1]
    return list(iter_days(date(year, month, 1), date(year, month, last)))


def minutes_between(start: datetime, end: datetime) -> float:
    return max(0.0, (end - start).total_seconds() / 60)


def round_half_up(value: float) -> int:
    # 2.5 -> 3 (round() would give 2).
    return int(math.floor(value + 0.5))
