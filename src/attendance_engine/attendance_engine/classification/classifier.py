from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional

from ..attendance.model import AttendanceLog
from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_TIMEZONE
from ..core.enums import DayCode, StatusSource
from ..employees.model import Employee
from ..leaves.model import Holiday, LeaveRequest
from .calendar_rules import ABSENT, WEEK_OFF, WEEKEND, WORKING_DAY, find_holiday, find_leave, weekly_status
from .evaluators.base import StatusEvaluator
from .evaluators.holiday_first import HolidayFirstEvaluator
from .model import DayStatus, RawStatus


class DailyStatusClassifier:
    """Maps one employee-day to exactly one muster-roll code.

    Precedence: future date, not yet joined, then the evaluator's raw status
    (half/full-day leave, other leave, holiday, present, week off, absent).
    Missing logs, holidays or leaves are valid inputs and never raise.
    """

    def __init__(
        self,
        evaluator: Optional[StatusEvaluator] = None,
        *,
        today_provider: Optional[Callable[[], date]] = None,
        timezone: str = DEFAULT_TIMEZONE,
    ):
        self._evaluator = evaluator or HolidayFirstEvaluator()
        self._timezone = timezone
        self._today = today_provider or (lambda: today_local(self._timezone))

    @property
    def evaluator(self) -> StatusEvaluator:
        return self._evaluator

    @property
    def timezone(self) -> str:
        return self._timezone

    def today(self) -> date:
        return self._today()

    def classify(
        self,
        day: date,
        log: Optional[AttendanceLog],
        employee: Employee,
        holidays: Optional[Iterable[Holiday]] = None,
        leaves: Optional[Iterable[LeaveRequest]] = None,
        *,
        today: Optional[date] = None,
    ) -> DayStatus:
        today = today or self.today()

        if day > today:
            return DayStatus(code=DayCode.NOT_AVAILABLE, label="N/A", source=StatusSource.FUTURE)
        if employee.joining_date and day < employee.joining_date:
            return DayStatus(code=DayCode.NOT_AVAILABLE, label="Not Joined", source=StatusSource.NOT_JOINED)

        raw = self._evaluator.evaluate(
            day,
            log,
            employee.saturday_policy,
            list(holidays or ()),
            self._approved_for(employee, leaves),
            today=today,
        )
        return self._to_day_status(raw)

    def is_expected_to_work(
        self,
        day: date,
        employee: Employee,
        holidays: Optional[Iterable[Holiday]] = None,
        leaves: Optional[Iterable[LeaveRequest]] = None,
        *,
        today: Optional[date] = None,
    ) -> bool:
        today = today or self.today()

        if day > today:
            return False
        if employee.joining_date and day < employee.joining_date:
            return False
        if find_holiday(day, holidays):
            return False
        if find_leave(day, self._approved_for(employee, leaves)):
            return False
        return weekly_status(day, employee.saturday_policy) == WORKING_DAY

    @staticmethod
    def _approved_for(employee: Employee, leaves: Optional[Iterable[LeaveRequest]]) -> list[LeaveRequest]:
        return [lv for lv in leaves or () if lv.is_approved and lv.employee_id == employee.employee_id]

    @staticmethod
    def _to_day_status(raw: RawStatus) -> DayStatus:
        leave_type = ((raw.leave.leave_type if raw.leave else None) or raw.leave_type or "").lower()
        is_half = "half" in leave_type
        is_full = "full" in leave_type and not is_half

        if is_half:
            return DayStatus(DayCode.HALF_DAY_LEAVE, "Half Day Leave", StatusSource.LEAVE, raw.status)
        if is_full:
            return DayStatus(DayCode.FULL_DAY_LEAVE, "Full Day Leave", StatusSource.LEAVE, raw.status)
        if raw.leave is not None or "Leave" in raw.status:
            return DayStatus(DayCode.LEAVE, "Leave", StatusSource.LEAVE, raw.status)
        if "Holiday" in raw.status:
            return DayStatus(DayCode.HOLIDAY, "Holiday", StatusSource.HOLIDAY, raw.status)
        if raw.status == "Present":
            return DayStatus(DayCode.PRESENT, "Present", StatusSource.ATTENDANCE, raw.status)
        if raw.status in (WEEKEND, WEEK_OFF):
            return DayStatus(DayCode.WEEK_OFF, raw.status, StatusSource.WEEKLY_OFF, raw.status)
        if raw.status in (WORKING_DAY, ABSENT):
            return DayStatus(DayCode.ABSENT, "Absent", StatusSource.CALENDAR, raw.status)
        return DayStatus(DayCode.ABSENT, "Absent", StatusSource.DEFAULT, raw.status)
