from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..common.datetime_utils import as_date, to_utc_iso
from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import InvalidTimeError


class TimeNormalizer:
    """Turns calendar days plus wall-clock times into instants in one local zone."""

    _TIME_FORMATS = ("%H:%M", "%H:%M:%S")

    def __init__(self, timezone: str = DEFAULT_TIMEZONE):
        try:
            self._tz = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {timezone!r}") from e
        self._tz_name = timezone

    @property
    def tz(self) -> ZoneInfo:
        return self._tz

    @property
    def timezone_name(self) -> str:
        return self._tz_name

    def parse_clock(self, hhmm: str) -> time:
        v = (hhmm or "").strip()
        for fmt in self._TIME_FORMATS:
            try:
                return datetime.strptime(v, fmt).time()
            except ValueError:
                continue
        raise InvalidTimeError(f"Invalid time (HH:MM): {hhmm!r}")

    def combine(self, day: Union[date, str], hhmm: str) -> datetime:
        try:
            d = as_date(day)
        except ValueError as e:
            raise InvalidTimeError(f"Invalid date (YYYY-MM-DD): {day!r}") from e
        return datetime.combine(d, self.parse_clock(hhmm), tzinfo=self._tz)

    @staticmethod
    def adjust_for_rollover(start: datetime, candidate_end: datetime) -> datetime:
        """An end clock-time earlier than the start means the span crossed midnight."""
        if candidate_end < start:
            return candidate_end + timedelta(days=1)
        return candidate_end

    def parse_instant(self, value: Any) -> datetime:
        """ISO-8601 text (fractional seconds, "Z" or +HHMM offsets) or a datetime."""
        if isinstance(value, datetime):
            instant = value
        elif isinstance(value, str):
            v = value.strip()
            if v.endswith(("Z", "z")):
                v = v[:-1] + "+00:00"
            try:
                instant = datetime.fromisoformat(v)
            except ValueError as e:
                raise InvalidTimeError(f"Invalid instant: {value!r}") from e
        else:
            raise InvalidTimeError(f"Invalid instant: {value!r}")

        if instant.tzinfo is None:
            return instant.replace(tzinfo=self._tz)
        return instant.astimezone(self._tz)

    @staticmethod
    def to_iso(instant: datetime) -> str:
        return to_utc_iso(instant)
