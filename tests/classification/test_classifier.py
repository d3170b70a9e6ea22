from datetime import date

import pytest

from src.attendance_engine.attendance_engine.attendance.model import AttendanceLog, Session
from src.attendance_engine.attendance_engine.classification import classifier as classifier_module
from src.attendance_engine.attendance_engine.classification.classifier import DailyStatusClassifier
from src.attendance_engine.attendance_engine.classification.evaluators.base import StatusEvaluator
from src.attendance_engine.attendance_engine.classification.model import RawStatus
from src.attendance_engine.attendance_engine.core.enums import DayCode, LeaveStatus, SaturdayPolicy, StatusSource
from src.attendance_engine.attendance_engine.employees.model import Employee
from src.attendance_engine.attendance_engine.leaves.model import Holiday, LeaveRequest

MONDAY = date(2024, 3, 4)


@pytest.fixture
def classifier(fixed_today):
    return DailyStatusClassifier(today_provider=lambda: fixed_today)


@pytest.fixture
def employee():
    return Employee(employee_id=1, full_name="Asha Rao", joining_date=date(2024, 1, 1))


def _worked(day, at):
    return AttendanceLog(
        attendance_date=day,
        sessions=(Session(at(day.year, day.month, day.day, 9), at(day.year, day.month, day.day, 17)),),
        employee_id=1,
    )


def _leave(day, **kw):
    return LeaveRequest(employee_id=1, status=kw.pop("status", LeaveStatus.APPROVED), leave_dates=(day,), **kw)


def test_future_day_is_not_available(classifier, employee, at):
    status = classifier.classify(date(2024, 3, 18), _worked(date(2024, 3, 18), at), employee)

    assert status.code == DayCode.NOT_AVAILABLE
    assert status.source == StatusSource.FUTURE


def test_before_joining_is_not_available(classifier):
    newcomer = Employee(employee_id=1, full_name="New Hire", joining_date=date(2024, 3, 11))

    status = classifier.classify(MONDAY, None, newcomer, [Holiday("Holi", MONDAY)])

    assert status.code == DayCode.NOT_AVAILABLE
    assert status.label == "Not Joined"


def test_present_when_log_has_sessions(classifier, employee, at):
    status = classifier.classify(MONDAY, _worked(MONDAY, at), employee)

    assert status.code == DayCode.PRESENT
    assert status.source == StatusSource.ATTENDANCE


def test_absent_on_past_working_day_without_sessions(classifier, employee):
    assert classifier.classify(MONDAY, None, employee).code == DayCode.ABSENT
    assert classifier.classify(MONDAY, AttendanceLog(attendance_date=MONDAY), employee).code == DayCode.ABSENT


def test_today_without_sessions_is_absent(classifier, employee, fixed_today):
    status = classifier.classify(fixed_today, None, employee)

    assert status.code == DayCode.ABSENT
    assert status.detail == "Working Day"


def test_sunday_is_week_off(classifier, employee):
    status = classifier.classify(date(2024, 3, 3), None, employee)

    assert status.code == DayCode.WEEK_OFF
    assert status.label == "Weekend"


@pytest.mark.parametrize(
    "saturday, code",
    [
        (date(2024, 3, 2), DayCode.WEEK_OFF),  # week 1
        (date(2024, 3, 9), DayCode.ABSENT),  # week 2
    ],
)
def test_week_1_and_3_saturday_policy(classifier, saturday, code):
    employee = Employee(employee_id=1, full_name="Minh", saturday_policy=SaturdayPolicy.WEEK_1_AND_3_OFF)

    assert classifier.classify(saturday, None, employee).code == code


def test_holiday(classifier, employee):
    status = classifier.classify(MONDAY, None, employee, [Holiday("Founders Day", MONDAY)])

    assert status.code == DayCode.HOLIDAY
    assert status.detail == "Holiday - Founders Day"


def test_tentative_holiday_is_ignored(classifier, employee):
    holidays = [Holiday("Maybe", MONDAY, is_tentative=True)]

    assert classifier.classify(MONDAY, None, employee, holidays).code == DayCode.ABSENT
    assert classifier.is_expected_to_work(MONDAY, employee, holidays)


@pytest.mark.parametrize(
    "leave_type, code",
    [
        ("Half Day - First Half", DayCode.HALF_DAY_LEAVE),
        ("Full Day", DayCode.FULL_DAY_LEAVE),
        ("", DayCode.LEAVE),
    ],
)
def test_leave_extent_codes(classifier, employee, leave_type, code):
    status = classifier.classify(MONDAY, None, employee, leaves=[_leave(MONDAY, leave_type=leave_type)])

    assert status.code == code
    assert status.source == StatusSource.LEAVE


def test_leave_wins_over_attendance(classifier, employee, at):
    status = classifier.classify(MONDAY, _worked(MONDAY, at), employee, leaves=[_leave(MONDAY)])

    assert status.code == DayCode.FULL_DAY_LEAVE


def test_pending_and_foreign_leaves_are_ignored(classifier, employee):
    leaves = [
        _leave(MONDAY, status=LeaveStatus.PENDING),
        LeaveRequest(employee_id=2, status=LeaveStatus.APPROVED, leave_dates=(MONDAY,)),
    ]

    assert classifier.classify(MONDAY, None, employee, leaves=leaves).code == DayCode.ABSENT


def test_compensatory_leave(classifier, employee):
    status = classifier.classify(MONDAY, None, employee, leaves=[_leave(MONDAY, leave_type="", request_type="Compensatory")])

    assert status.code == DayCode.LEAVE
    assert status.detail == "Comp Off"


def test_expected_to_work(classifier, employee, fixed_today):
    assert classifier.is_expected_to_work(MONDAY, employee)
    assert classifier.is_expected_to_work(fixed_today, employee)
    assert not classifier.is_expected_to_work(date(2024, 3, 3), employee)
    assert not classifier.is_expected_to_work(date(2024, 3, 18), employee)
    assert not classifier.is_expected_to_work(MONDAY, employee, [Holiday("Holi", MONDAY)])
    assert not classifier.is_expected_to_work(MONDAY, employee, leaves=[_leave(MONDAY)])


def test_explicit_today_overrides_provider(classifier, employee):
    assert classifier.classify(MONDAY, None, employee, today=date(2024, 3, 1)).code == DayCode.NOT_AVAILABLE


@pytest.mark.parametrize(
    "saturday, expected",
    [
        (date(2024, 3, 2), False),
        (date(2024, 3, 9), True),
        (date(2024, 3, 16), False),
    ],
)
def test_week_1_and_3_saturdays_expected_to_work(saturday, expected):
    classifier = DailyStatusClassifier(today_provider=lambda: date(2024, 3, 31))
    employee = Employee(employee_id=1, full_name="Minh", saturday_policy=SaturdayPolicy.WEEK_1_AND_3_OFF)

    assert classifier.is_expected_to_work(saturday, employee) is expected


class FixedStatusEvaluator(StatusEvaluator):
    def __init__(self, status):
        self._status = status

    def evaluate(self, day, log, saturday_policy, holidays, leaves, *, today):
        return RawStatus(status=self._status)


@pytest.mark.parametrize(
    "saturday, expected, code",
    [
        (date(2024, 3, 2), True, DayCode.ABSENT),
        (date(2024, 3, 9), False, DayCode.WEEK_OFF),
        (date(2024, 3, 16), True, DayCode.ABSENT),
        (date(2024, 3, 23), False, DayCode.WEEK_OFF),
        (date(2024, 3, 30), True, DayCode.ABSENT),
    ],
)
def test_week_2_and_4_saturdays(saturday, expected, code):
    classifier = DailyStatusClassifier(today_provider=lambda: date(2024, 3, 31))
    employee = Employee(employee_id=1, full_name="Lena", saturday_policy=SaturdayPolicy.WEEK_2_AND_4_OFF)

    assert classifier.is_expected_to_work(saturday, employee) is expected
    assert classifier.classify(saturday, None, employee).code == code


def test_all_saturdays_off():
    classifier = DailyStatusClassifier(today_provider=lambda: date(2024, 3, 31))
    employee = Employee(employee_id=1, full_name="Ravi", saturday_policy=SaturdayPolicy.ALL_SATURDAYS_OFF)

    for saturday in (date(2024, 3, 2), date(2024, 3, 9), date(2024, 3, 16), date(2024, 3, 23), date(2024, 3, 30)):
        assert not classifier.is_expected_to_work(saturday, employee)
        status = classifier.classify(saturday, None, employee)
        assert status.code == DayCode.WEEK_OFF
        assert status.label == "Week Off"


def test_unrecognized_raw_status_falls_back_to_absent(employee, fixed_today):
    classifier = DailyStatusClassifier(FixedStatusEvaluator("Something Else"), today_provider=lambda: fixed_today)

    status = classifier.classify(MONDAY, None, employee)

    assert status.code == DayCode.ABSENT
    assert status.source == StatusSource.DEFAULT
    assert status.detail == "Something Else"


def test_future_day_ignores_holiday_and_leave(classifier, employee, at):
    future = date(2024, 3, 18)

    status = classifier.classify(
        future,
        _worked(future, at),
        employee,
        [Holiday("Holi", future)],
        [_leave(future, leave_type="Half Day - First Half")],
    )

    assert status.code == DayCode.NOT_AVAILABLE
    assert status.source == StatusSource.FUTURE


def test_default_today_uses_configured_zone(monkeypatch):
    seen = []

    def fake_today(tz):
        seen.append(tz)
        return date(2024, 3, 15)

    monkeypatch.setattr(classifier_module, "today_local", fake_today)
    classifier = DailyStatusClassifier(timezone="Europe/Berlin")

    assert classifier.today() == date(2024, 3, 15)
    assert classifier.timezone == "Europe/Berlin"
    assert seen == ["Europe/Berlin"]
