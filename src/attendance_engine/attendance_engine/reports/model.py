from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from ..attendance.model import AttendanceLog, DaySummary, TimelineBlock
from ..classification.model import DayStatus
from ..employees.model import Employee
from ..leaves.model import Holiday, LeaveRequest


@dataclass(frozen=True)
class AttendanceSnapshot:
    """Immutable inputs for one report run, fetched once by the calling layer."""

    holidays: tuple[Holiday, ...] = ()
    leaves: tuple[LeaveRequest, ...] = ()
    logs: Mapping[tuple[int, date], AttendanceLog] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_logs(
        cls,
        *,
        logs: Iterable[AttendanceLog] = (),
        holidays: Iterable[Holiday] = (),
        leaves: Iterable[LeaveRequest] = (),
    ) -> "AttendanceSnapshot":
        by_key = {(int(log.employee_id), log.attendance_date): log for log in logs if log.employee_id is not None}
        return cls(holidays=tuple(holidays), leaves=tuple(leaves), logs=MappingProxyType(by_key))

    def log_for(self, employee_id: int, day: date) -> Optional[AttendanceLog]:
        return self.logs.get((int(employee_id), day))

    def leaves_for(self, employee_id: int) -> tuple[LeaveRequest, ...]:
        return tuple(lv for lv in self.leaves if lv.employee_id == employee_id)


@dataclass(frozen=True)
class DayTotals:
    day: date
    present: int
    absent: int
    total: int
    present_pct: int


@dataclass(frozen=True)
class EmployeeTotals:
    employee_id: int
    present_days: int
    absent_days: int
    expected_days: int
    pct: int


@dataclass(frozen=True)
class MusterRollRow:
    employee: Employee
    statuses: tuple[DayStatus, ...]
    totals: EmployeeTotals


@dataclass(frozen=True)
class MusterRoll:
    """Per-day, per-employee attendance grid plus totals."""

    days: tuple[date, ...]
    rows: tuple[MusterRollRow, ...]
    daily: tuple[DayTotals, ...]
    total_present: int
    total_absent: int
    total_expected: int
    total_pct: int


@dataclass(frozen=True)
class DayDetail:
    employee: Employee
    day: date
    status: DayStatus
    log: Optional[AttendanceLog]
    timeline: tuple[TimelineBlock, ...]
    summary: Optional[DaySummary]
