"""Calendar lookups shared by the evaluators and the expected-to-work rule."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import week_of_month
from ..core.enums import SaturdayPolicy
from ..leaves.model import Holiday, LeaveRequest

SUNDAY = 6
SATURDAY = 5

WEEKEND = "Weekend"
WEEK_OFF = "Week Off"
WORKING_DAY = "Working Day"
ABSENT = "Absent"


def find_holiday(day: date, holidays: Optional[Iterable[Holiday]]) -> Optional[Holiday]:
    return next((h for h in holidays or () if h.falls_on(day)), None)


def find_leave(day: date, leaves: Optional[Iterable[LeaveRequest]]) -> Optional[LeaveRequest]:
    return next((lv for lv in leaves or () if lv.is_approved and lv.covers(day)), None)


def is_working_saturday(day: date, policy: SaturdayPolicy) -> bool:
    if day.weekday() != SATURDAY:
        return False

    week = week_of_month(day)
    if policy == SaturdayPolicy.ALL_SATURDAYS_OFF:
        return False
    if policy == SaturdayPolicy.WEEK_1_AND_3_OFF:
        return week not in (1, 3)
    if policy == SaturdayPolicy.WEEK_2_AND_4_OFF:
        return week not in (2, 4)
    return True


def weekly_status(day: date, policy: SaturdayPolicy) -> str:
    """Weekend (Sunday), Week Off (off Saturday) or Working Day."""
    if day.weekday() == SUNDAY:
        return WEEKEND
    if day.weekday() == SATURDAY and not is_working_saturday(day, policy):
        return WEEK_OFF
    return WORKING_DAY
