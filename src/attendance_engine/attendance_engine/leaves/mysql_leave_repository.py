from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Optional, Sequence

from ..core.constants import DEFAULT_LEAVE_TYPE, DEFAULT_REQUEST_TYPE
from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, placeholders
from .model import Holiday, LeaveRequest
from .repository import HolidayRepository, LeaveRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT name, holiday_date, is_tentative
                FROM holidays
                ORDER BY holiday_date ASC, name ASC
                """
            )
            return [
                Holiday(
                    name=r["name"],
                    holiday_date=r.get("holiday_date"),
                    is_tentative=bool(r.get("is_tentative")),
                )
                for r in fetchall(cur)
            ]


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        status: Optional[LeaveStatus] = LeaveStatus.APPROVED,
        employee_ids: Optional[Sequence[int]] = None,
    ) -> Sequence[LeaveRequest]:
        clauses = [
            "lr.request_id IN (SELECT request_id FROM leave_request_dates WHERE leave_date BETWEEN %s AND %s)"
        ]
        params: list[object] = [start_date, end_date]
        if status is not None:
            clauses.append("lr.status=%s")
            params.append(status.value)
        if employee_ids:
            ids = [int(i) for i in employee_ids]
            clauses.append(f"lr.employee_id IN ({placeholders(ids)})")
            params.extend(ids)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT lr.request_id, lr.employee_id, lr.status, lr.leave_type, lr.request_type, d.leave_date
                FROM leave_requests lr
                JOIN leave_request_dates d ON d.request_id = lr.request_id
                WHERE {where}
                ORDER BY lr.request_id ASC, d.leave_date ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

        dates: dict[int, list[date]] = defaultdict(list)
        heads: dict[int, dict] = {}
        for r in rows:
            rid = int(r["request_id"])
            heads.setdefault(rid, r)
            dates[rid].append(r["leave_date"])

        return [
            LeaveRequest(
                employee_id=int(r["employee_id"]),
                status=LeaveStatus(r["status"]),
                leave_dates=tuple(dates[rid]),
                leave_type=r.get("leave_type") or DEFAULT_LEAVE_TYPE,
                request_type=r.get("request_type") or DEFAULT_REQUEST_TYPE,
                request_id=rid,
            )
            for rid, r in heads.items()
        ]
