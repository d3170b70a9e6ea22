from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import Holiday, LeaveRequest


class HolidayRepository(Protocol):
    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError


class LeaveRepository(Protocol):
    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        status: Optional[LeaveStatus] = LeaveStatus.APPROVED,
        employee_ids: Optional[Sequence[int]] = None,
    ) -> Sequence[LeaveRequest]:
        """Leave requests with at least one leave date inside the range."""

        raise NotImplementedError
