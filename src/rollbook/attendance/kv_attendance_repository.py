from __future__ import annotations

from typing import Optional, Sequence

from ..storage.store import KeyValueStore, attendance_key
from .model import DailyAttendance
from .repository import AttendanceRepository


class KVAttendanceRepository(AttendanceRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_all(self, staff_code: str) -> Sequence[DailyAttendance]:
        return [DailyAttendance.from_dict(row) for row in self._store.get(attendance_key(staff_code), [])]

    def get_by_date(self, staff_code: str, date: str) -> Optional[DailyAttendance]:
        for daily in self.list_all(staff_code):
            if daily.date == date:
                return daily
        return None

    def save(self, attendance: DailyAttendance) -> None:
        kept = [a for a in self.list_all(attendance.staff_code) if a.date != attendance.date]
        kept.append(attendance)
        self._store.set(attendance_key(attendance.staff_code), [a.to_dict() for a in kept])

    def list_in_range(self, staff_code: str, start: str, end: str) -> Sequence[DailyAttendance]:
        # ISO dates are fixed width, so string order is date order
        return [a for a in self.list_all(staff_code) if start <= a.date <= end]

    def delete_all(self, staff_code: str) -> None:
        self._store.delete(attendance_key(staff_code))
