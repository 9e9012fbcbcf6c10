from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily status of one student, stored by its short code."""

    PRESENT = "P"
    ABSENT = "AB"
    ON_DUTY = "OD"

    @property
    def label(self) -> str:
        return {
            AttendanceStatus.PRESENT: "Present",
            AttendanceStatus.ABSENT: "Absent",
            AttendanceStatus.ON_DUTY: "On Duty",
        }[self]
