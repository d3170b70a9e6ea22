"""Ví dụ: dựng bảng chấm công (muster roll) từ dữ liệu trong bộ nhớ, không cần DB."""

from datetime import date

from src.attendance_engine.attendance_engine.attendance.normalizer import TimeNormalizer
from src.attendance_engine.attendance_engine.attendance.validator import SessionBreakValidator
from src.attendance_engine.attendance_engine.attendance.model import AttendanceLog
from src.attendance_engine.attendance_engine.core.enums import LeaveStatus, SaturdayPolicy
from src.attendance_engine.attendance_engine.employees.model import Employee
from src.attendance_engine.attendance_engine.leaves.model import Holiday, LeaveRequest
from src.attendance_engine.attendance_engine.reports.aggregator import AttendanceAggregator
from src.attendance_engine.attendance_engine.reports.export import write_muster_roll_csv
from src.attendance_engine.attendance_engine.reports.model import AttendanceSnapshot
from src.attendance_engine.attendance_engine.common.datetime_utils import iter_days


def main():
    validator = SessionBreakValidator(TimeNormalizer("Asia/Kolkata"))
    payload = validator.build_validated_payload(
        {
            "sessions": [{"startTime": "2024-03-04T09:00:00", "endTime": "2024-03-04T17:00:00"}],
            "breaks": [{"startTime": "2024-03-04T12:00:00", "endTime": "2024-03-04T13:00:00", "breakType": "Paid"}],
            "notes": " regular day ",
        }
    )
    print(payload.to_dict())

    employees = [
        Employee(1, "Asha Rao", joining_date=date(2024, 1, 1), employee_code="E001"),
        Employee(2, "Minh Tran", saturday_policy=SaturdayPolicy.WEEK_1_AND_3_OFF, employee_code="E002"),
    ]
    snapshot = AttendanceSnapshot.from_logs(
        logs=[
            AttendanceLog(date(2024, 3, 4), sessions=payload.sessions, breaks=payload.breaks, employee_id=1),
        ],
        holidays=[Holiday("Holi", date(2024, 3, 8))],
        leaves=[LeaveRequest(2, LeaveStatus.APPROVED, (date(2024, 3, 5),), leave_type="Half Day - First Half")],
    )

    roll = AttendanceAggregator().build_muster_roll(
        list(iter_days(date(2024, 3, 1), date(2024, 3, 10))),
        employees,
        snapshot,
        today=date(2024, 3, 10),
    )
    print(write_muster_roll_csv(roll))


if __name__ == "__main__":
    main()
