from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import BlockType
from .model import BreakEntry, Session, TimelineBlock


def _contains(session: Session, brk: BreakEntry) -> bool:
    if brk.start_time < session.start_time:
        return False
    if session.end_time is None:
        return True
    return brk.end_time is not None and brk.end_time <= session.end_time


def _work(start: datetime, end: Optional[datetime]) -> TimelineBlock:
    return TimelineBlock(block_type=BlockType.SESSION, start_time=start, end_time=end)


def _break(brk: BreakEntry) -> TimelineBlock:
    return TimelineBlock(
        block_type=BlockType.BREAK,
        start_time=brk.start_time,
        end_time=brk.end_time,
        break_type=brk.break_type,
    )


class TimelineReconciler:
    """Splits work sessions at break boundaries into one chronological timeline.

    Example: a 09:00-17:00 session with a 12:00-13:00 break becomes
    work 09:00-12:00, break 12:00-13:00, work 13:00-17:00.
    """

    def reconcile(self, sessions: Sequence[Session], breaks: Sequence[BreakEntry]) -> list[TimelineBlock]:
        sessions = list(sessions or ())
        breaks = list(breaks or ())
        blocks: list[TimelineBlock] = []

        for session in sessions:
            inside = sorted((b for b in breaks if _contains(session, b)), key=lambda b: b.start_time)
            if not inside:
                blocks.append(_work(session.start_time, session.end_time))
                continue
            blocks.extend(self._split(session, inside))

        for brk in breaks:
            if not any(_contains(s, brk) for s in sessions):
                blocks.append(_break(brk))

        # list.sort is stable: equal starts keep session/break input order.
        blocks.sort(key=lambda b: b.start_time)
        return blocks

    @staticmethod
    def _split(session: Session, inside: Sequence[BreakEntry]) -> list[TimelineBlock]:
        out: list[TimelineBlock] = []
        cursor = session.start_time

        for brk in inside:
            if cursor < brk.start_time:
                out.append(_work(cursor, brk.start_time))
            out.append(_break(brk))
            # Cursor follows the last break, not the furthest end: overlapping
            # breaks inside one session yield overlapping blocks.
            cursor = brk.end_time or brk.start_time

        if session.end_time is not None:
            if cursor < session.end_time:
                out.append(_work(cursor, session.end_time))
        elif cursor > session.start_time:
            out.append(_work(cursor, None))
        return out
