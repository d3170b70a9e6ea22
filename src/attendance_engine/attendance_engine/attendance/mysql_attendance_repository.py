from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from ..core.enums import BreakType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, placeholders, to_db_datetime
from .model import AttendanceLog, BreakEntry, Session
from .repository import AttendanceLogRepository
from .validator import ValidatedPayload


class MySQLAttendanceLogRepository(AttendanceLogRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tz: ZoneInfo):
        self._conn_factory = conn_factory
        self._tz = tz

    def get_by_id(self, log_id: int) -> Optional[AttendanceLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, employee_id, attendance_date, notes
                FROM attendance_logs
                WHERE log_id=%s
                """,
                (int(log_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return self._hydrate(cur, [r])[0]

    def get_for_employee_and_date(self, employee_id: int, attendance_date: date) -> Optional[AttendanceLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, employee_id, attendance_date, notes
                FROM attendance_logs
                WHERE employee_id=%s AND attendance_date=%s
                """,
                (int(employee_id), attendance_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return self._hydrate(cur, [r])[0]

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_ids: Optional[Sequence[int]] = None,
    ) -> Sequence[AttendanceLog]:
        clauses = ["attendance_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if employee_ids:
            ids = [int(i) for i in employee_ids]
            clauses.append(f"employee_id IN ({placeholders(ids)})")
            params.extend(ids)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT log_id, employee_id, attendance_date, notes
                FROM attendance_logs
                WHERE {where}
                ORDER BY attendance_date ASC, employee_id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            if not rows:
                return []
            return self._hydrate(cur, rows)

    def replace_entries(self, *, log_id: int, payload: ValidatedPayload) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT log_id FROM attendance_logs WHERE log_id=%s FOR UPDATE", (int(log_id),))
            if not fetchone(cur):
                return False

            cur.execute("DELETE FROM attendance_sessions WHERE log_id=%s", (int(log_id),))
            cur.execute("DELETE FROM break_logs WHERE log_id=%s", (int(log_id),))

            if payload.sessions:
                cur.executemany(
                    "INSERT INTO attendance_sessions(log_id, start_time, end_time) VALUES(%s,%s,%s)",
                    [
                        (int(log_id), to_db_datetime(s.start_time, self._tz), to_db_datetime(s.end_time, self._tz))
                        for s in payload.sessions
                    ],
                )
            if payload.breaks:
                cur.executemany(
                    "INSERT INTO break_logs(log_id, start_time, end_time, break_type) VALUES(%s,%s,%s,%s)",
                    [
                        (
                            int(log_id),
                            to_db_datetime(b.start_time, self._tz),
                            to_db_datetime(b.end_time, self._tz),
                            b.break_type.value,
                        )
                        for b in payload.breaks
                    ],
                )

            cur.execute("UPDATE attendance_logs SET notes=%s WHERE log_id=%s", (payload.notes, int(log_id)))
            return True

    def _hydrate(self, cur, rows: list[dict]) -> list[AttendanceLog]:
        log_ids = [int(r["log_id"]) for r in rows]
        in_clause = placeholders(log_ids)

        cur.execute(
            f"""
            SELECT log_id, start_time, end_time
            FROM attendance_sessions
            WHERE log_id IN ({in_clause})
            ORDER BY start_time ASC, session_id ASC
            """,
            tuple(log_ids),
        )
        sessions: dict[int, list[Session]] = defaultdict(list)
        for s in fetchall(cur):
            sessions[int(s["log_id"])].append(
                Session(
                    start_time=from_db_datetime(s["start_time"], self._tz),
                    end_time=from_db_datetime(s.get("end_time"), self._tz),
                )
            )

        # Active breaks (no end yet) are not part of a day's closed record.
        cur.execute(
            f"""
            SELECT log_id, start_time, end_time, break_type
            FROM break_logs
            WHERE log_id IN ({in_clause}) AND end_time IS NOT NULL
            ORDER BY start_time ASC, break_id ASC
            """,
            tuple(log_ids),
        )
        breaks: dict[int, list[BreakEntry]] = defaultdict(list)
        for b in fetchall(cur):
            breaks[int(b["log_id"])].append(
                BreakEntry(
                    start_time=from_db_datetime(b["start_time"], self._tz),
                    end_time=from_db_datetime(b["end_time"], self._tz),
                    break_type=BreakType.resolve(b.get("break_type") or "") or BreakType.UNPAID,
                )
            )

        return [
            AttendanceLog(
                attendance_date=r["attendance_date"],
                sessions=tuple(sessions.get(int(r["log_id"]), ())),
                breaks=tuple(breaks.get(int(r["log_id"]), ())),
                notes=r.get("notes") or "",
                employee_id=int(r["employee_id"]),
                log_id=int(r["log_id"]),
            )
            for r in rows
        ]
