from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, Sequence

from ...attendance.model import AttendanceLog
from ...core.enums import SaturdayPolicy
from ...leaves.model import Holiday, LeaveRequest
from ..calendar_rules import ABSENT, WORKING_DAY, weekly_status
from ..model import RawStatus

COMPENSATORY = "Compensatory"
SWAP_LEAVE = "Swap Leave"
LOSS_OF_PAY = "Loss of Pay"


class StatusEvaluator(ABC):
    """Strategy Pattern: decide the raw status of one employee-day.

    Concrete evaluators differ only in whether a declared holiday or an
    approved leave wins when both fall on the same date.
    """

    @abstractmethod
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
        raise NotImplementedError

    @staticmethod
    def holiday_status(holiday: Holiday) -> RawStatus:
        return RawStatus(status=f"Holiday - {holiday.name}", holiday=holiday)

    @staticmethod
    def leave_status(leave: LeaveRequest) -> RawStatus:
        if leave.request_type == COMPENSATORY:
            return RawStatus(status="Comp Off", leave_type="Comp Off", leave=leave)
        if leave.request_type == SWAP_LEAVE:
            return RawStatus(status=SWAP_LEAVE, leave_type=SWAP_LEAVE, leave=leave)

        kind = "Loss of pay" if leave.request_type == LOSS_OF_PAY else leave.request_type
        return RawStatus(status=f"Leave - {kind}", leave_type=kind, leave=leave)

    @staticmethod
    def attendance_status(day: date, log: Optional[AttendanceLog], saturday_policy: SaturdayPolicy, *, today: date) -> RawStatus:
        if log is not None and log.has_sessions:
            return RawStatus(status="Present")

        expected = weekly_status(day, saturday_policy)
        if expected == WORKING_DAY:
            if day < today:
                return RawStatus(status=ABSENT)
            if day > today:
                return RawStatus(status="N/A")
        return RawStatus(status=expected)
