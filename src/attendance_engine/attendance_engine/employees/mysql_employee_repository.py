from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import SaturdayPolicy
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, full_name, employee_code, department, joining_date, saturday_policy"


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        full_name=r["full_name"],
        joining_date=r.get("joining_date"),
        saturday_policy=SaturdayPolicy.parse(r.get("saturday_policy")),
        employee_code=r.get("employee_code"),
        department=r.get("department"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_active(self, *, department: Optional[str] = None) -> Sequence[Employee]:
        clauses = ["is_active=1", "role<>'Admin'"]
        params: list[object] = []
        if department:
            clauses.append("department=%s")
            params.append(department)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE {where}
                ORDER BY full_name ASC, employee_id ASC
                """,
                tuple(params),
            )
            return [_to_employee(r) for r in fetchall(cur)]
