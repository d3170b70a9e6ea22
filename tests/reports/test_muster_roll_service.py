from datetime import date

import pytest

from src.attendance_engine.attendance_engine.attendance.model import AttendanceLog, BreakEntry, Session
from src.attendance_engine.attendance_engine.classification.classifier import DailyStatusClassifier
from src.attendance_engine.attendance_engine.core.enums import BlockType, BreakType, DayCode
from src.attendance_engine.attendance_engine.core.exceptions import ValidationError
from src.attendance_engine.attendance_engine.employees.model import Employee
from src.attendance_engine.attendance_engine.leaves.model import Holiday
from src.attendance_engine.attendance_engine.reports.aggregator import AttendanceAggregator
from src.attendance_engine.attendance_engine.reports import service as service_module
from src.attendance_engine.attendance_engine.reports.service import MusterRollService

from tests.reports.fakes import FakeEmployeesRepo, FakeHolidaysRepo, FakeLeavesRepo, FakeLogsRepo

MON = date(2024, 3, 4)


@pytest.fixture
def logs(at):
    return FakeLogsRepo(
        [
            AttendanceLog(
                attendance_date=MON,
                sessions=(Session(at(2024, 3, 4, 9), at(2024, 3, 4, 17)),),
                breaks=(BreakEntry(at(2024, 3, 4, 12), at(2024, 3, 4, 13), BreakType.PAID),),
                employee_id=1,
                log_id=10,
            )
        ]
    )


@pytest.fixture
def employees():
    return FakeEmployeesRepo(
        [
            Employee(1, "Asha", department="Ops"),
            Employee(2, "Minh", department="Sales"),
        ]
    )


@pytest.fixture
def service(employees, logs, fixed_today, at):
    return MusterRollService(
        employees,
        logs,
        FakeHolidaysRepo([Holiday("Holi", date(2024, 3, 25))]),
        FakeLeavesRepo(),
        aggregator=AttendanceAggregator(DailyStatusClassifier(today_provider=lambda: fixed_today)),
        clock=lambda: at(2024, 3, 15, 18),
    )


def test_build_month_fetches_snapshot_once(service, employees, logs):
    roll = service.build_month(2024, 3)

    assert len(roll.days) == 31
    assert employees.calls == 1
    assert logs.range_calls == 1
    by_id = {row.employee.employee_id: row for row in roll.rows}
    assert by_id[1].statuses[3].code == DayCode.PRESENT
    assert by_id[1].statuses[24].code == DayCode.NOT_AVAILABLE


def test_build_range_filters_department(service):
    roll = service.build_range(start=MON, end=MON, department="Sales")

    assert [row.employee.full_name for row in roll.rows] == ["Minh"]
    assert roll.rows[0].statuses[0].code == DayCode.ABSENT


def test_build_range_rejects_inverted_dates(service):
    with pytest.raises(ValidationError):
        service.build_range(start=date(2024, 3, 5), end=MON)


def test_day_detail_with_log(service):
    detail = service.day_detail(1, MON)

    assert detail.status.code == DayCode.PRESENT
    assert [b.block_type for b in detail.timeline] == [BlockType.SESSION, BlockType.BREAK, BlockType.SESSION]
    assert detail.summary.total_work_minutes == 420
    assert detail.summary.paid_break_minutes == 60


def test_day_detail_without_log(service):
    detail = service.day_detail(2, MON)

    assert detail.status.code == DayCode.ABSENT
    assert detail.log is None
    assert detail.timeline == ()
    assert detail.summary is None


def test_day_detail_unknown_employee(service):
    with pytest.raises(ValidationError):
        service.day_detail(99, MON)


def test_default_clock_uses_configured_zone(monkeypatch, employees, logs, fixed_today, at):
    seen = []

    def fake_now(tz):
        seen.append(tz)
        return at(2024, 3, 15, 18)

    monkeypatch.setattr(service_module, "now_local", fake_now)
    service = MusterRollService(
        employees,
        logs,
        FakeHolidaysRepo(),
        FakeLeavesRepo(),
        aggregator=AttendanceAggregator(DailyStatusClassifier(today_provider=lambda: fixed_today)),
        timezone="Europe/Berlin",
    )

    detail = service.day_detail(1, MON)

    assert detail.summary.total_work_minutes == 420
    assert seen == ["Europe/Berlin"]
