from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import DailyAttendance


class AttendanceRepository(Protocol):
    def list_all(self, staff_code: str) -> Sequence[DailyAttendance]:
        raise NotImplementedError

    def get_by_date(self, staff_code: str, date: str) -> Optional[DailyAttendance]:
        raise NotImplementedError

    def save(self, attendance: DailyAttendance) -> None:
        """Store the snapshot, replacing any existing one for the same date."""

        raise NotImplementedError

    def list_in_range(self, staff_code: str, start: str, end: str) -> Sequence[DailyAttendance]:
        raise NotImplementedError

    def delete_all(self, staff_code: str) -> None:
        raise NotImplementedError
