from __future__ import annotations

import csv
import io

from .model import MusterRoll

SUMMARY_LABEL = "Daily Summary"


def _fieldnames(roll: MusterRoll) -> list[str]:
    return [
        "employee_id",
        "employee_code",
        "full_name",
        "department",
        *(d.isoformat() for d in roll.days),
        "present",
        "absent",
        "expected",
        "pct",
    ]


def write_muster_roll_csv(roll: MusterRoll) -> str:
    """Render a muster roll as CSV text.

    One row per employee with the day code under each date column, followed by
    a daily summary row holding "present/total" per day and the grand totals.
    """

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=_fieldnames(roll))
    writer.writeheader()

    for row in roll.rows:
        record = {
            "employee_id": row.employee.employee_id,
            "employee_code": row.employee.employee_code or "",
            "full_name": row.employee.full_name,
            "department": row.employee.department or "",
            "present": row.totals.present_days,
            "absent": row.totals.absent_days,
            "expected": row.totals.expected_days,
            "pct": f"{row.totals.pct}%",
        }
        for day, status in zip(roll.days, row.statuses):
            record[day.isoformat()] = status.code.value
        writer.writerow(record)

    summary = {
        "employee_id": "",
        "employee_code": "",
        "full_name": SUMMARY_LABEL,
        "department": "",
        "present": roll.total_present,
        "absent": roll.total_absent,
        "expected": roll.total_expected,
        "pct": f"{roll.total_pct}%",
    }
    for totals in roll.daily:
        summary[totals.day.isoformat()] = f"{totals.present}/{totals.total}"
    writer.writerow(summary)

    return out.getvalue()
