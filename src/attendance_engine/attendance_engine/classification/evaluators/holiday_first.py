from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ...attendance.model import AttendanceLog
from ...core.enums import SaturdayPolicy
from ...leaves.model import Holiday, LeaveRequest
from ..calendar_rules import find_holiday, find_leave
from ..model import RawStatus
from .base import StatusEvaluator


class HolidayFirstEvaluator(StatusEvaluator):
    """Holiday, then approved leave, then attendance, then the weekly calendar."""

    def evaluate(
        self,
        day: date,
        log: Optional[AttendanceLog],
        saturday_policy: SaturdayPolicy,
        holidays: Sequence[Holiday],
        leaves: Sequence[LeaveRequest],
        *,
        today: date,
    ) -> RawStatus:
        holiday = find_holiday(day, holidays)
        if holiday:
            return self.holiday_status(holiday)

        leave = find_leave(day, leaves)
        if leave:
            return self.leave_status(leave)

        return self.attendance_status(day, log, saturday_policy, today=today)
