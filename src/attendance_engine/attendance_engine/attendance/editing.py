"""Immutable editable log and pure edit functions.

The host layer owns the current ``EditableLog`` value; every edit returns a new
value, which is finally turned into a raw batch for SessionBreakValidator.
Entries are addressed by their 0-based position in the log.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

from ..core.constants import (
    DEFAULT_BREAK_END,
    DEFAULT_BREAK_START,
    DEFAULT_SESSION_END,
    DEFAULT_SESSION_START,
)
from ..core.enums import BreakType
from .model import AttendanceLog
from .normalizer import TimeNormalizer

TIME_FIELDS = ("startTime", "endTime")


@dataclass(frozen=True)
class EditableEntry:
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    break_type: Optional[str] = None

    def to_raw(self, *, with_type: bool) -> dict:
        raw = {
            "startTime": TimeNormalizer.to_iso(self.start_time) if self.start_time else None,
            "endTime": TimeNormalizer.to_iso(self.end_time) if self.end_time else None,
        }
        if with_type:
            raw["breakType"] = self.break_type
        return raw


@dataclass(frozen=True)
class EditableLog:
    attendance_date: date
    sessions: tuple[EditableEntry, ...] = ()
    breaks: tuple[EditableEntry, ...] = ()
    notes: str = ""

    def to_raw(self) -> dict:
        return {
            "sessions": [s.to_raw(with_type=False) for s in self.sessions],
            "breaks": [b.to_raw(with_type=True) for b in self.breaks],
            "notes": self.notes,
            "attendanceDate": self.attendance_date.strftime("%Y-%m-%d"),
        }


def from_log(log: AttendanceLog) -> EditableLog:
    return EditableLog(
        attendance_date=log.attendance_date,
        sessions=tuple(EditableEntry(s.start_time, s.end_time) for s in log.sessions),
        breaks=tuple(EditableEntry(b.start_time, b.end_time, b.break_type.value) for b in log.breaks),
        notes=log.notes or "",
    )


def _check_position(entries: tuple, index: int, label: str) -> None:
    if index < 0 or index >= len(entries):
        raise IndexError(f"No {label} at position {index + 1}")


def _edit_time(entry: EditableEntry, day: date, field: str, value: Optional[str], normalizer: TimeNormalizer) -> EditableEntry:
    attr = "start_time" if field == "startTime" else "end_time"
    if not value:
        return replace(entry, **{attr: None})

    instant = normalizer.combine(day, value)
    if field == "endTime" and entry.start_time is not None:
        instant = normalizer.adjust_for_rollover(entry.start_time, instant)
    return replace(entry, **{attr: instant})


def apply_session_edit(
    log: EditableLog, index: int, field: str, value: Optional[str], normalizer: TimeNormalizer
) -> EditableLog:
    _check_position(log.sessions, index, "session")
    if field not in TIME_FIELDS:
        raise ValueError(f"Unsupported session field: {field}")

    edited = _edit_time(log.sessions[index], log.attendance_date, field, value, normalizer)
    sessions = log.sessions[:index] + (edited,) + log.sessions[index + 1 :]
    return replace(log, sessions=sessions)


def apply_break_edit(
    log: EditableLog, index: int, field: str, value: Optional[str], normalizer: TimeNormalizer
) -> EditableLog:
    _check_position(log.breaks, index, "break")
    entry = log.breaks[index]
    if field == "breakType":
        edited = replace(entry, break_type=value)
    elif field in TIME_FIELDS:
        edited = _edit_time(entry, log.attendance_date, field, value, normalizer)
    else:
        raise ValueError(f"Unsupported break field: {field}")

    breaks = log.breaks[:index] + (edited,) + log.breaks[index + 1 :]
    return replace(log, breaks=breaks)


def add_session(log: EditableLog, normalizer: TimeNormalizer) -> EditableLog:
    entry = EditableEntry(
        start_time=normalizer.combine(log.attendance_date, DEFAULT_SESSION_START),
        end_time=normalizer.combine(log.attendance_date, DEFAULT_SESSION_END),
    )
    return replace(log, sessions=log.sessions + (entry,))


def add_break(log: EditableLog, normalizer: TimeNormalizer) -> EditableLog:
    entry = EditableEntry(
        start_time=normalizer.combine(log.attendance_date, DEFAULT_BREAK_START),
        end_time=normalizer.combine(log.attendance_date, DEFAULT_BREAK_END),
        break_type=BreakType.PAID.value,
    )
    return replace(log, breaks=log.breaks + (entry,))


def remove_session(log: EditableLog, index: int) -> EditableLog:
    _check_position(log.sessions, index, "session")
    return replace(log, sessions=log.sessions[:index] + log.sessions[index + 1 :])


def remove_break(log: EditableLog, index: int) -> EditableLog:
    _check_position(log.breaks, index, "break")
    return replace(log, breaks=log.breaks[:index] + log.breaks[index + 1 :])


def set_notes(log: EditableLog, notes: Optional[str]) -> EditableLog:
    return replace(log, notes=notes or "")
