from __future__ import annotations

from typing import Iterable

from ..common.validators import require_text
from ..core.enums import AttendanceStatus
from ..roster.model import Student


def parse_reg_no_list(text: str) -> list[str]:
    """Split a comma-separated list of reg numbers, dropping blanks."""
    text = require_text(text, "Registration number list")
    return [item.strip() for item in text.split(",") if item.strip()]


def build_daily_records(
    roster: Iterable[Student],
    absent: str,
    on_duty: str,
) -> tuple[dict[str, AttendanceStatus], list[str]]:
    """Give every roster student a status for the day.

    Absent wins over on duty; anybody not listed is present. Returns the
    records plus the listed reg numbers that are not in the roster.
    """
    absent_list = parse_reg_no_list(absent)
    on_duty_list = parse_reg_no_list(on_duty)

    records: dict[str, AttendanceStatus] = {}
    for student in roster:
        if student.reg_no in absent_list:
            records[student.reg_no] = AttendanceStatus.ABSENT
        elif student.reg_no in on_duty_list:
            records[student.reg_no] = AttendanceStatus.ON_DUTY
        else:
            records[student.reg_no] = AttendanceStatus.PRESENT

    unknown: list[str] = []
    for reg_no in absent_list + on_duty_list:
        if reg_no not in records and reg_no not in unknown:
            unknown.append(reg_no)
    return records, unknown
