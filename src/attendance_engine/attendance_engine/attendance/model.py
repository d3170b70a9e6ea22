from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import BlockType, BreakType


@dataclass(frozen=True)
class Session:
    """Thực thể miền (domain): Phiên làm việc. ``end_time`` None = chưa tan ca."""

    start_time: datetime
    end_time: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.end_time is None


@dataclass(frozen=True)
class BreakEntry:
    """Thực thể miền (domain): Giờ nghỉ."""

    start_time: datetime
    end_time: datetime
    break_type: BreakType = BreakType.UNPAID


@dataclass(frozen=True)
class AttendanceLog:
    """One employee's recorded activity for one calendar day."""

    attendance_date: date
    sessions: tuple[Session, ...] = ()
    breaks: tuple[BreakEntry, ...] = ()
    notes: str = ""
    employee_id: Optional[int] = None
    log_id: Optional[int] = None

    @property
    def has_sessions(self) -> bool:
        return len(self.sessions) > 0


@dataclass(frozen=True)
class TimelineBlock:
    """Derived block of a day's timeline (never persisted)."""

    block_type: BlockType
    start_time: datetime
    end_time: Optional[datetime]
    break_type: Optional[BreakType] = None

    @property
    def is_break(self) -> bool:
        return self.block_type == BlockType.BREAK


@dataclass(frozen=True)
class DaySummary:
    """Read-model cho màn hình chi tiết ngày."""

    total_work_minutes: int
    total_break_minutes: int
    paid_break_minutes: int
    first_check_in: Optional[datetime]
    last_check_out: Optional[datetime]
