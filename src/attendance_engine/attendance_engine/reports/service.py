from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional

from ..attendance.repository import AttendanceLogRepository
from ..attendance.summary import summarize_day
from ..attendance.timeline import TimelineReconciler
from ..common.datetime_utils import iter_days, month_days, now_local
from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..leaves.repository import HolidayRepository, LeaveRepository
from .aggregator import AttendanceAggregator
from .model import AttendanceSnapshot, DayDetail, MusterRoll

logger = logging.getLogger(__name__)


class MusterRollService:
    """Fetches one snapshot per request and runs the engine over it."""

    def __init__(
        self,
        employees: EmployeeRepository,
        logs: AttendanceLogRepository,
        holidays: HolidayRepository,
        leaves: LeaveRepository,
        *,
        aggregator: Optional[AttendanceAggregator] = None,
        reconciler: Optional[TimelineReconciler] = None,
        clock: Optional[Callable[[], datetime]] = None,
        timezone: str = DEFAULT_TIMEZONE,
    ):
        self._employees = employees
        self._logs = logs
        self._holidays = holidays
        self._leaves = leaves
        self._aggregator = aggregator or AttendanceAggregator()
        self._reconciler = reconciler or TimelineReconciler()
        self._timezone = timezone
        self._clock = clock or (lambda: now_local(self._timezone))

    def build_month(
        self,
        year: int,
        month: int,
        *,
        department: Optional[str] = None,
        today: Optional[date] = None,
    ) -> MusterRoll:
        days = month_days(int(year), int(month))
        return self.build_range(start=days[0], end=days[-1], department=department, today=today)

    def build_range(
        self,
        *,
        start: date,
        end: date,
        department: Optional[str] = None,
        today: Optional[date] = None,
    ) -> MusterRoll:
        if end < start:
            raise ValidationError("Ngày kết thúc không thể trước ngày bắt đầu")

        employees = list(self._employees.list_active(department=department))
        ids = [e.employee_id for e in employees]
        snapshot = self._snapshot(start=start, end=end, employee_ids=ids)

        roll = self._aggregator.build_muster_roll(list(iter_days(start, end)), employees, snapshot, today=today)
        logger.info(
            "Built muster roll %s..%s: employees=%d present=%d expected=%d",
            start,
            end,
            len(employees),
            roll.total_present,
            roll.total_expected,
        )
        return roll

    def day_detail(
        self,
        employee_id: int,
        day: date,
        *,
        today: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> DayDetail:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise ValidationError("Nhân viên không tồn tại")

        log = self._logs.get_for_employee_and_date(employee.employee_id, day)
        snapshot = AttendanceSnapshot.from_logs(
            logs=[log] if log else [],
            holidays=self._holidays.list_all(),
            leaves=self._leaves.list_range(start_date=day, end_date=day, employee_ids=[employee.employee_id]),
        )
        status = self._aggregator.classify(employee, day, snapshot, today=today)

        if not log:
            return DayDetail(employee=employee, day=day, status=status, log=None, timeline=(), summary=None)

        now = now or self._clock()
        return DayDetail(
            employee=employee,
            day=day,
            status=status,
            log=log,
            timeline=tuple(self._reconciler.reconcile(log.sessions, log.breaks)),
            summary=summarize_day(log.sessions, log.breaks, now=now),
        )

    def _snapshot(self, *, start: date, end: date, employee_ids: list[int]) -> AttendanceSnapshot:
        if not employee_ids:
            return AttendanceSnapshot(holidays=tuple(self._holidays.list_all()))
        return AttendanceSnapshot.from_logs(
            logs=self._logs.list_range(start_date=start, end_date=end, employee_ids=employee_ids),
            holidays=self._holidays.list_all(),
            leaves=self._leaves.list_range(start_date=start, end_date=end, employee_ids=employee_ids),
        )
