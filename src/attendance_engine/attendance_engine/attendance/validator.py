from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Optional, TypeVar

from ..common.validators import as_list, first_present, require_record
from ..core.constants import DEFAULT_BREAK_TYPE, MAX_ENTRY_HOURS
from ..core.enums import BreakType
from ..core.exceptions import (
    DurationExceedsMaxError,
    EntryError,
    InvalidBreakTypeError,
    InvalidTimeError,
    MissingFieldError,
    NonPositiveDurationError,
    ValidationError,
)
from .model import BreakEntry, Session
from .normalizer import TimeNormalizer

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ValidatedPayload:
    """Canonical edit batch, ready to replace a log's sessions and breaks."""

    sessions: tuple[Session, ...]
    breaks: tuple[BreakEntry, ...]
    notes: str
    attendance_date: Optional[Any] = None

    def to_dict(self) -> dict:
        payload = {
            "sessions": [
                {
                    "startTime": TimeNormalizer.to_iso(s.start_time),
                    "endTime": TimeNormalizer.to_iso(s.end_time) if s.end_time else None,
                }
                for s in self.sessions
            ],
            "breaks": [
                {
                    "startTime": TimeNormalizer.to_iso(b.start_time),
                    "endTime": TimeNormalizer.to_iso(b.end_time),
                    "breakType": b.break_type.value,
                }
                for b in self.breaks
            ],
            "notes": self.notes,
        }
        if self.attendance_date:
            payload["attendanceDate"] = self.attendance_date
        return payload


class SessionBreakValidator:
    """Validates raw session/break edits and rebuilds them into a ValidatedPayload.

    Every entry is visited. Each entry reports only its first failing rule.
    With ``collect_all`` the failures of all entries are raised together as one
    ValidationError; otherwise the first entry failure is raised as-is.
    """

    def __init__(
        self,
        normalizer: Optional[TimeNormalizer] = None,
        *,
        max_hours: int = MAX_ENTRY_HOURS,
        collect_all: bool = True,
    ):
        self._normalizer = normalizer or TimeNormalizer()
        self._max = timedelta(hours=int(max_hours))
        self._max_hours = int(max_hours)
        self._collect_all = bool(collect_all)

    def build_validated_payload(self, raw_log: Optional[Mapping], attendance_date: Optional[Any] = None) -> ValidatedPayload:
        raw_log = raw_log if isinstance(raw_log, Mapping) else {}
        errors: list[EntryError] = []

        sessions = self._collect(as_list(raw_log.get("sessions")), self._clean_session, errors)
        breaks = self._collect(as_list(raw_log.get("breaks")), self._clean_break, errors)

        if errors:
            logger.warning("Rejected attendance edit batch: %d invalid entries (%s)", len(errors), errors[0])
            raise ValidationError(errors=errors)

        if attendance_date is None:
            attendance_date = raw_log.get("attendanceDate") or None

        payload = ValidatedPayload(
            sessions=tuple(sessions),
            breaks=tuple(breaks),
            notes=str(raw_log.get("notes") or "").strip(),
            attendance_date=attendance_date,
        )
        logger.debug(
            "Validated attendance payload: sessions=%d breaks=%d has_notes=%s",
            len(payload.sessions),
            len(payload.breaks),
            bool(payload.notes),
        )
        return payload

    def _collect(self, items: list, clean: Callable[[Any, int], T], errors: list[EntryError]) -> list[T]:
        out: list[T] = []
        for index, item in enumerate(items):
            try:
                out.append(clean(item, index + 1))
            except EntryError as e:
                if not self._collect_all:
                    raise
                errors.append(e)
        return out

    def _parse(self, value: Any, *, label: str, position: int, field: str) -> datetime:
        try:
            return self._normalizer.parse_instant(value)
        except InvalidTimeError:
            raise InvalidTimeError(
                f"{label} #{position} has an invalid {field}: {value}",
                label=label,
                position=position,
            ) from None

    def _span(self, raw: Mapping, *, label: str, position: int) -> tuple[datetime, Optional[datetime]]:
        start_raw = raw.get("startTime")
        if not start_raw:
            raise MissingFieldError(f"{label} #{position} is missing startTime.", label=label, position=position)
        start = self._parse(start_raw, label=label, position=position, field="startTime")

        end_raw = raw.get("endTime")
        if not end_raw:
            return start, None

        end = self._parse(end_raw, label=label, position=position, field="endTime")
        end = self._normalizer.adjust_for_rollover(start, end)

        duration = end - start
        if duration <= timedelta(0):
            raise NonPositiveDurationError(
                f"{label} #{position} end time must be after start time.",
                label=label,
                position=position,
            )
        if duration > self._max:
            raise DurationExceedsMaxError(
                f"{label} #{position} duration cannot exceed {self._max_hours} hours.",
                label=label,
                position=position,
            )
        return start, end

    def _clean_session(self, item: Any, position: int) -> Session:
        raw = require_record(item, label="Session", position=position)
        start, end = self._span(raw, label="Session", position=position)
        return Session(start_time=start, end_time=end)

    def _clean_break(self, item: Any, position: int) -> BreakEntry:
        raw = require_record(item, label="Break", position=position)
        if not raw.get("startTime"):
            raise MissingFieldError(f"Break #{position} is missing startTime.", label="Break", position=position)
        if not raw.get("endTime"):
            raise MissingFieldError(f"Break #{position} is missing endTime.", label="Break", position=position)

        start, end = self._span(raw, label="Break", position=position)

        requested = str(first_present(raw, "breakType", "type") or DEFAULT_BREAK_TYPE).strip()
        break_type = BreakType.resolve(requested)
        if break_type is None:
            raise InvalidBreakTypeError(
                f"Break #{position} has an invalid breakType: {requested}. Must be 'Paid', 'Unpaid', or 'Extra'.",
                label="Break",
                position=position,
            )
        return BreakEntry(start_time=start, end_time=end, break_type=break_type)
