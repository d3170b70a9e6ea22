from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from src.attendance_engine.attendance_engine.attendance.normalizer import TimeNormalizer

TZ_NAME = "Asia/Kolkata"


@pytest.fixture
def tz() -> ZoneInfo:
    return ZoneInfo(TZ_NAME)


@pytest.fixture
def normalizer() -> TimeNormalizer:
    return TimeNormalizer(TZ_NAME)


@pytest.fixture
def fixed_today() -> date:
    # Friday
    return date(2024, 3, 15)


@pytest.fixture
def at(tz):
    """at(2024, 3, 4, 9, 30) -> aware datetime in the test zone."""

    def _at(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
        return datetime(year, month, day, hour, minute, tzinfo=tz)

    return _at
