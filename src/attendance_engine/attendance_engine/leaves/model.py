from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import DEFAULT_LEAVE_TYPE, DEFAULT_REQUEST_TYPE
from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    """Đơn nghỉ phép. Chỉ đơn Approved mới ảnh hưởng tới phân loại ngày công.

    ``request_type`` is the leave kind (Planned, Sick, Compensatory, Swap Leave,
    Loss of Pay, ...); ``leave_type`` is its extent (Full Day / Half Day - ...).
    """

    employee_id: int
    status: LeaveStatus
    leave_dates: tuple[date, ...]
    leave_type: str = DEFAULT_LEAVE_TYPE
    request_type: str = DEFAULT_REQUEST_TYPE
    request_id: Optional[int] = None

    @property
    def is_approved(self) -> bool:
        return self.status == LeaveStatus.APPROVED

    def covers(self, day: date) -> bool:
        return day in self.leave_dates


@dataclass(frozen=True)
class Holiday:
    """Ngày lễ. Tentative holidays (date not fixed yet) never match a day."""

    name: str
    holiday_date: Optional[date] = None
    is_tentative: bool = False

    def falls_on(self, day: date) -> bool:
        if self.is_tentative or self.holiday_date is None:
            return False
        return self.holiday_date == day
