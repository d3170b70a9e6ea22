from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..classification.classifier import DailyStatusClassifier
from ..classification.model import DayStatus
from ..common.datetime_utils import round_half_up
from ..core.enums import DayCode
from ..employees.model import Employee
from .model import AttendanceSnapshot, DayTotals, EmployeeTotals, MusterRoll, MusterRollRow


def _pct(part: int, whole: int) -> int:
    return round_half_up(part / whole * 100) if whole > 0 else 0


class AttendanceAggregator:
    """Rolls per-day classifications up into cohort and per-employee totals."""

    def __init__(self, classifier: Optional[DailyStatusClassifier] = None):
        self._classifier = classifier or DailyStatusClassifier()

    @property
    def classifier(self) -> DailyStatusClassifier:
        return self._classifier

    def classify(self, employee: Employee, day: date, snapshot: AttendanceSnapshot, *, today: Optional[date] = None) -> DayStatus:
        return self._classifier.classify(
            day,
            snapshot.log_for(employee.employee_id, day),
            employee,
            snapshot.holidays,
            snapshot.leaves_for(employee.employee_id),
            today=today,
        )

    def is_expected(self, employee: Employee, day: date, snapshot: AttendanceSnapshot, *, today: date) -> bool:
        return self._classifier.is_expected_to_work(
            day,
            employee,
            snapshot.holidays,
            snapshot.leaves_for(employee.employee_id),
            today=today,
        )

    def aggregate_day(
        self,
        day: date,
        employees: Iterable[Employee],
        snapshot: AttendanceSnapshot,
        *,
        today: Optional[date] = None,
    ) -> DayTotals:
        today = today or self._today()
        present = absent = total = 0

        for employee in employees:
            if not self.is_expected(employee, day, snapshot, today=today):
                continue
            total += 1
            code = self.classify(employee, day, snapshot, today=today).code
            if code == DayCode.PRESENT:
                present += 1
            elif code == DayCode.ABSENT:
                absent += 1

        return DayTotals(day=day, present=present, absent=absent, total=total, present_pct=_pct(present, total))

    def aggregate_period(
        self,
        employee: Employee,
        days: Iterable[date],
        snapshot: AttendanceSnapshot,
        *,
        today: Optional[date] = None,
    ) -> EmployeeTotals:
        today = today or self._today()
        statuses = [(d, self.classify(employee, d, snapshot, today=today)) for d in days]
        return self._employee_totals(employee, statuses, snapshot, today=today)

    def build_muster_roll(
        self,
        days: Sequence[date],
        employees: Sequence[Employee],
        snapshot: AttendanceSnapshot,
        *,
        today: Optional[date] = None,
    ) -> MusterRoll:
        today = today or self._today()
        days = tuple(days)

        rows = []
        for employee in employees:
            statuses = [(d, self.classify(employee, d, snapshot, today=today)) for d in days]
            rows.append(
                MusterRollRow(
                    employee=employee,
                    statuses=tuple(s for _, s in statuses),
                    totals=self._employee_totals(employee, statuses, snapshot, today=today),
                )
            )

        daily = tuple(self.aggregate_day(d, employees, snapshot, today=today) for d in days)
        total_present = sum(t.present for t in daily)
        total_expected = sum(t.total for t in daily)

        return MusterRoll(
            days=days,
            rows=tuple(rows),
            daily=daily,
            total_present=total_present,
            total_absent=sum(t.absent for t in daily),
            total_expected=total_expected,
            total_pct=_pct(total_present, total_expected),
        )

    def _employee_totals(
        self,
        employee: Employee,
        statuses: Sequence[tuple[date, DayStatus]],
        snapshot: AttendanceSnapshot,
        *,
        today: date,
    ) -> EmployeeTotals:
        present = sum(1 for _, s in statuses if s.code == DayCode.PRESENT)
        absent = sum(1 for _, s in statuses if s.code == DayCode.ABSENT)
        expected = sum(1 for d, _ in statuses if self.is_expected(employee, d, snapshot, today=today))
        return EmployeeTotals(
            employee_id=employee.employee_id,
            present_days=present,
            absent_days=absent,
            expected_days=expected,
            pct=_pct(present, expected),
        )

    def _today(self) -> date:
        return self._classifier.today()
