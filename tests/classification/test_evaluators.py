from datetime import date

import pytest

from src.attendance_engine.attendance_engine.classification.evaluators.holiday_first import HolidayFirstEvaluator
from src.attendance_engine.attendance_engine.classification.evaluators.leave_first import LeaveFirstEvaluator
from src.attendance_engine.attendance_engine.classification.factory import EvaluatorFactory
from src.attendance_engine.attendance_engine.core.enums import LeaveStatus, SaturdayPolicy, StatusPrecedence
from src.attendance_engine.attendance_engine.leaves.model import Holiday, LeaveRequest

DAY = date(2024, 3, 8)
TODAY = date(2024, 3, 15)
POLICY = SaturdayPolicy.ALL_SATURDAYS_WORKING


def _leave(request_type="Planned"):
    return LeaveRequest(employee_id=1, status=LeaveStatus.APPROVED, leave_dates=(DAY,), request_type=request_type)


def test_holiday_first_prefers_holiday():
    raw = HolidayFirstEvaluator().evaluate(DAY, None, POLICY, [Holiday("Holi", DAY)], [_leave()], today=TODAY)

    assert raw.status == "Holiday - Holi"


def test_leave_first_prefers_leave():
    raw = LeaveFirstEvaluator().evaluate(DAY, None, POLICY, [Holiday("Holi", DAY)], [_leave()], today=TODAY)

    assert raw.status == "Leave - Planned"


@pytest.mark.parametrize(
    "request_type, status",
    [
        ("Compensatory", "Comp Off"),
        ("Swap Leave", "Swap Leave"),
        ("Loss of Pay", "Leave - Loss of pay"),
        ("Sick", "Leave - Sick"),
    ],
)
def test_leave_labels(request_type, status):
    raw = HolidayFirstEvaluator().evaluate(DAY, None, POLICY, [], [_leave(request_type)], today=TODAY)

    assert raw.status == status


def test_future_working_day_without_log():
    raw = HolidayFirstEvaluator().evaluate(date(2024, 3, 18), None, POLICY, [], [], today=TODAY)

    assert raw.status == "N/A"


@pytest.mark.parametrize(
    "precedence, cls",
    [
        (None, HolidayFirstEvaluator),
        ("holiday_first", HolidayFirstEvaluator),
        (" LEAVE_FIRST ", LeaveFirstEvaluator),
        (StatusPrecedence.LEAVE_FIRST, LeaveFirstEvaluator),
    ],
)
def test_factory_for_precedence(precedence, cls):
    assert isinstance(EvaluatorFactory().for_precedence(precedence), cls)


def test_factory_rejects_unknown_precedence():
    with pytest.raises(ValueError):
        EvaluatorFactory().for_precedence("random")
