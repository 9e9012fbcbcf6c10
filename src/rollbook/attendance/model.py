from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class DailyAttendance:
    """Domain entity: the complete status map for one staff member on one date.

    Saved and replaced wholesale; individual entries are never patched.
    """

    date: str
    staff_code: str
    records: dict[str, AttendanceStatus]

    def count(self, status: AttendanceStatus) -> int:
        return sum(1 for s in self.records.values() if s == status)

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "staffCode": self.staff_code,
            "records": {reg_no: status.value for reg_no, status in self.records.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DailyAttendance":
        return cls(
            date=str(data["date"]),
            staff_code=str(data["staffCode"]),
            records={str(k): AttendanceStatus(v) for k, v in (data.get("records") or {}).items()},
        )


@dataclass(frozen=True)
class DayStats:
    """Read-model for the dashboard."""

    date: str
    present: int
    absent: int
    on_duty: int
    total: int

    @classmethod
    def of(cls, daily: DailyAttendance) -> "DayStats":
        return cls(
            date=daily.date,
            present=daily.count(AttendanceStatus.PRESENT),
            absent=daily.count(AttendanceStatus.ABSENT),
            on_duty=daily.count(AttendanceStatus.ON_DUTY),
            total=len(daily.records),
        )


@dataclass(frozen=True)
class MarkingResult:
    attendance: DailyAttendance
    unknown_reg_nos: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SavedMarking:
    """Absent/on-duty lists recovered from a stored snapshot for re-editing."""

    date: str
    absent: list[str]
    on_duty: list[str]
