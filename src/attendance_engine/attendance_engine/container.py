from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceLogRepository
from .attendance.normalizer import TimeNormalizer
from .attendance.service import AttendanceEditService
from .attendance.timeline import TimelineReconciler
from .attendance.validator import SessionBreakValidator
from .classification.classifier import DailyStatusClassifier
from .classification.factory import EvaluatorFactory
from .core.constants import DEFAULT_TIMEZONE, MAX_ENTRY_HOURS
from .core.enums import StatusPrecedence
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .leaves.mysql_leave_repository import MySQLHolidayRepository, MySQLLeaveRepository
from .reports.aggregator import AttendanceAggregator
from .reports.service import MusterRollService


@dataclass(frozen=True)
class EngineSettings:
    timezone: str = DEFAULT_TIMEZONE
    max_entry_hours: int = MAX_ENTRY_HOURS
    status_precedence: str = StatusPrecedence.HOLIDAY_FIRST.value
    collect_all_errors: bool = True

    @classmethod
    def from_module(cls, settings: Any) -> "EngineSettings":
        return cls(
            timezone=str(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE)),
            max_entry_hours=int(getattr(settings, "MAX_ENTRY_HOURS", MAX_ENTRY_HOURS)),
            status_precedence=str(getattr(settings, "STATUS_PRECEDENCE", StatusPrecedence.HOLIDAY_FIRST.value)),
            collect_all_errors=bool(getattr(settings, "COLLECT_ALL_ERRORS", True)),
        )


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceLogRepository
    holidays_repo: MySQLHolidayRepository
    leaves_repo: MySQLLeaveRepository

    normalizer: TimeNormalizer
    validator: SessionBreakValidator
    classifier: DailyStatusClassifier
    aggregator: AttendanceAggregator

    muster_roll_service: MusterRollService
    edit_service: AttendanceEditService


def build_container(*, db_config: Mapping, settings: Optional[EngineSettings] = None) -> Container:
    settings = settings or EngineSettings()
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    normalizer = TimeNormalizer(settings.timezone)
    tz = normalizer.tz

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceLogRepository(conn, tz=tz)
    holidays_repo = MySQLHolidayRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)

    validator = SessionBreakValidator(
        normalizer,
        max_hours=settings.max_entry_hours,
        collect_all=settings.collect_all_errors,
    )
    classifier = DailyStatusClassifier(
        EvaluatorFactory().for_precedence(settings.status_precedence),
        timezone=settings.timezone,
    )
    aggregator = AttendanceAggregator(classifier)

    muster_roll_service = MusterRollService(
        employees_repo,
        attendance_repo,
        holidays_repo,
        leaves_repo,
        aggregator=aggregator,
        reconciler=TimelineReconciler(),
        timezone=settings.timezone,
    )
    edit_service = AttendanceEditService(attendance_repo, validator)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
        leaves_repo=leaves_repo,
        normalizer=normalizer,
        validator=validator,
        classifier=classifier,
        aggregator=aggregator,
        muster_roll_service=muster_roll_service,
        edit_service=edit_service,
    )
