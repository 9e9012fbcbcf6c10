from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import AttendanceStatus
from ..roster.model import Student


@dataclass
class StudentSummary:
    """Read-model for reports: one roster student over a date range."""

    student: Student
    status_by_date: dict[str, AttendanceStatus] = field(default_factory=dict)
    total_present: int = 0
    total_absent: int = 0
    total_on_duty: int = 0

    def to_dict(self) -> dict:
        return {
            "regNo": self.student.reg_no,
            "name": self.student.name,
            "dates": {d: s.value for d, s in self.status_by_date.items()},
            "totalPresent": self.total_present,
            "totalAbsent": self.total_absent,
            "totalOnDuty": self.total_on_duty,
        }


@dataclass(frozen=True)
class ExportOptions:
    include_colors: bool = True
    include_summary: bool = True
