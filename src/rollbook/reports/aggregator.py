from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from ..attendance.model import DailyAttendance
from ..core.enums import AttendanceStatus
from ..roster.model import Student
from .model import StudentSummary


def aggregate_attendance(
    roster: Sequence[Student],
    snapshots: Iterable[DailyAttendance],
    start: str,
    end: str,
) -> list[StudentSummary]:
    """Summarize each roster student's statuses between start and end inclusive.

    Only explicit entries are counted; a date without an entry for a student
    adds to no total. Dates are ISO strings and compared as such. When a date
    occurs more than once the later snapshot replaces the earlier one.
    """
    by_date: dict[str, Mapping[str, AttendanceStatus]] = {}
    for daily in snapshots:
        if start <= daily.date <= end:
            by_date[daily.date] = daily.records

    summaries: list[StudentSummary] = []
    for student in roster:
        summary = StudentSummary(student=student)
        for day, records in by_date.items():
            status = records.get(student.reg_no)
            if status is None:
                continue
            summary.status_by_date[day] = status
            if status == AttendanceStatus.PRESENT:
                summary.total_present += 1
            elif status == AttendanceStatus.ABSENT:
                summary.total_absent += 1
            elif status == AttendanceStatus.ON_DUTY:
                summary.total_on_duty += 1
        summaries.append(summary)
    return summaries
