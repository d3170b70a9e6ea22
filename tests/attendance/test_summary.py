from src.attendance_engine.attendance_engine.attendance.model import BreakEntry, Session
from src.attendance_engine.attendance_engine.attendance.summary import summarize_day
from src.attendance_engine.attendance_engine.core.enums import BreakType


def test_worked_minutes_exclude_all_breaks(at):
    sessions = [Session(at(2024, 3, 4, 9), at(2024, 3, 4, 13)), Session(at(2024, 3, 4, 14), at(2024, 3, 4, 18))]
    breaks = [
        BreakEntry(at(2024, 3, 4, 11), at(2024, 3, 4, 11, 30), BreakType.PAID),
        BreakEntry(at(2024, 3, 4, 16), at(2024, 3, 4, 16, 15), BreakType.UNPAID),
    ]

    summary = summarize_day(sessions, breaks, now=at(2024, 3, 4, 20))

    assert summary.total_work_minutes == 8 * 60 - 45
    assert summary.total_break_minutes == 45
    assert summary.paid_break_minutes == 30
    assert summary.first_check_in == at(2024, 3, 4, 9)
    assert summary.last_check_out == at(2024, 3, 4, 18)


def test_open_session_runs_until_now(at):
    summary = summarize_day([Session(at(2024, 3, 4, 9))], [], now=at(2024, 3, 4, 11, 30))

    assert summary.total_work_minutes == 150
    assert summary.last_check_out is None


def test_worked_time_never_negative(at):
    breaks = [BreakEntry(at(2024, 3, 4, 12), at(2024, 3, 4, 13))]

    summary = summarize_day([], breaks, now=at(2024, 3, 4, 20))

    assert summary.total_work_minutes == 0
    assert summary.total_break_minutes == 60
    assert summary.first_check_in is None
