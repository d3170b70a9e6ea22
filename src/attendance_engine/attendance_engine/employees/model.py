from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import SaturdayPolicy


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    ``joining_date`` None means no lower bound on classification.
    """

    employee_id: int
    full_name: str
    joining_date: Optional[date] = None
    saturday_policy: SaturdayPolicy = SaturdayPolicy.ALL_SATURDAYS_WORKING
    employee_code: Optional[str] = None
    department: Optional[str] = None
