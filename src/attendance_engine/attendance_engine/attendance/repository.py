from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceLog
from .validator import ValidatedPayload


class AttendanceLogRepository(Protocol):
    def get_by_id(self, log_id: int) -> Optional[AttendanceLog]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, attendance_date: date) -> Optional[AttendanceLog]:
        raise NotImplementedError

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_ids: Optional[Sequence[int]] = None,
    ) -> Sequence[AttendanceLog]:
        raise NotImplementedError

    def replace_entries(self, *, log_id: int, payload: ValidatedPayload) -> bool:
        """Rebuild-and-replace: drop the log's sessions/breaks and store the payload's.

        Returns False when the log does not exist.
        """

        raise NotImplementedError
