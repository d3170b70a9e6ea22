from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import minutes_between
from ..core.enums import BreakType
from .model import BreakEntry, DaySummary, Session


def _span_minutes(start: datetime, end: Optional[datetime], now: datetime) -> float:
    return minutes_between(start, end or now)


def summarize_day(sessions: Sequence[Session], breaks: Sequence[BreakEntry], *, now: datetime) -> DaySummary:
    """Standard rule: worked = sessions - breaks, not below 0.

    Open sessions (no clock-out yet) are measured up to ``now``.
    """

    sessions = list(sessions or ())
    breaks = list(breaks or ())

    session_minutes = sum(_span_minutes(s.start_time, s.end_time, now) for s in sessions)
    break_minutes = sum(_span_minutes(b.start_time, b.end_time, now) for b in breaks)
    paid_minutes = sum(
        _span_minutes(b.start_time, b.end_time, now) for b in breaks if b.break_type == BreakType.PAID
    )

    return DaySummary(
        total_work_minutes=int(max(session_minutes - break_minutes, 0)),
        total_break_minutes=int(break_minutes),
        paid_break_minutes=int(paid_minutes),
        first_check_in=sessions[0].start_time if sessions else None,
        last_check_out=sessions[-1].end_time if sessions else None,
    )
