from __future__ import annotations

from enum import Enum
from typing import Optional


class BreakType(str, Enum):
    """Loại giờ nghỉ được chấp nhận trong payload."""

    PAID = "Paid"
    UNPAID = "Unpaid"
    EXTRA = "Extra"

    @classmethod
    def resolve(cls, value: str) -> Optional["BreakType"]:
        """Case-insensitive lookup; returns None for unknown values."""
        v = (value or "").strip().lower()
        for member in cls:
            if member.value.lower() == v:
                return member
        return None


class BlockType(str, Enum):
    SESSION = "session"
    BREAK = "break"


class SaturdayPolicy(str, Enum):
    """Quy tắc nghỉ thứ Bảy theo tuần trong tháng."""

    ALL_SATURDAYS_WORKING = "All Saturdays Working"
    ALL_SATURDAYS_OFF = "All Saturdays Off"
    WEEK_1_AND_3_OFF = "Week 1 & 3 Off"
    WEEK_2_AND_4_OFF = "Week 2 & 4 Off"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SaturdayPolicy":
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        return cls.ALL_SATURDAYS_WORKING


class LeaveStatus(str, Enum):
    """Trạng thái luồng duyệt đơn nghỉ phép."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class DayCode(str, Enum):
    """Mã trạng thái một ngày trên bảng chấm công (muster roll)."""

    PRESENT = "P"
    ABSENT = "A"
    HOLIDAY = "HL"
    WEEK_OFF = "W"
    LEAVE = "L"
    HALF_DAY_LEAVE = "HF"
    FULL_DAY_LEAVE = "FF"
    NOT_AVAILABLE = "N/A"


class StatusSource(str, Enum):
    """Which precedence rule produced a DayStatus."""

    FUTURE = "future"
    NOT_JOINED = "not_joined"
    LEAVE = "leave"
    HOLIDAY = "holiday"
    ATTENDANCE = "attendance"
    WEEKLY_OFF = "weekly_off"
    CALENDAR = "calendar"
    DEFAULT = "default"


class StatusPrecedence(str, Enum):
    """Holiday-vs-leave policy for the raw status evaluator."""

    HOLIDAY_FIRST = "holiday_first"
    LEAVE_FIRST = "leave_first"
