from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import DayCode, StatusSource
from ..leaves.model import Holiday, LeaveRequest


@dataclass(frozen=True)
class RawStatus:
    """Evaluator output before it is mapped to a muster-roll code.

    ``status`` is one of: "Holiday - <name>", "Leave - <type>", "Comp Off",
    "Swap Leave", "Present", "Weekend", "Week Off", "Working Day", "Absent", "N/A".
    """

    status: str
    leave_type: Optional[str] = None
    leave: Optional[LeaveRequest] = None
    holiday: Optional[Holiday] = None


@dataclass(frozen=True)
class DayStatus:
    code: DayCode
    label: str
    source: StatusSource
    detail: Optional[str] = None
