from __future__ import annotations

import logging
from typing import Mapping, Sequence

from ..common.validators import require_iso_date
from ..core.constants import DEFAULT_RECENT_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..roster.repository import RosterRepository
from .marking import build_daily_records
from .model import DailyAttendance, DayStats, MarkingResult, SavedMarking
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, rosters: RosterRepository):
        self._attendance = attendance
        self._rosters = rosters

    def mark(self, staff_code: str, *, date: str, absent: str = "", on_duty: str = "") -> MarkingResult:
        date = require_iso_date(date, "A date")
        roster = self._rosters.get(staff_code)
        if not roster:
            raise ValidationError("Please import a roster before marking attendance!")

        records, unknown = build_daily_records(roster, absent, on_duty)
        daily = DailyAttendance(date=date, staff_code=staff_code, records=records)
        self._attendance.save(daily)

        if unknown:
            logger.warning("Ignored reg numbers not in roster of %s: %s", staff_code, ", ".join(unknown))
        logger.info("Saved attendance for %s on %s (%d students)", staff_code, date, len(records))
        return MarkingResult(attendance=daily, unknown_reg_nos=unknown)

    def save_records(self, staff_code: str, *, date: str, records: Mapping[str, str]) -> DailyAttendance:
        date = require_iso_date(date, "A date")
        parsed: dict[str, AttendanceStatus] = {}
        for reg_no, status in records.items():
            try:
                parsed[str(reg_no)] = AttendanceStatus(status)
            except ValueError:
                raise ValidationError(f"Invalid status {status!r} for {reg_no}")

        daily = DailyAttendance(date=date, staff_code=staff_code, records=parsed)
        self._attendance.save(daily)
        return daily

    def get(self, staff_code: str, date: str) -> DailyAttendance | None:
        return self._attendance.get_by_date(staff_code, require_iso_date(date, "A date"))

    def load_saved(self, staff_code: str, date: str) -> SavedMarking:
        daily = self.get(staff_code, date)
        if not daily:
            raise NotFoundError("No attendance data found for this date!")
        return SavedMarking(
            date=daily.date,
            absent=[r for r, s in daily.records.items() if s == AttendanceStatus.ABSENT],
            on_duty=[r for r, s in daily.records.items() if s == AttendanceStatus.ON_DUTY],
        )

    def preview(self, staff_code: str, *, absent: str = "", on_duty: str = "") -> list[dict]:
        roster = self._rosters.get(staff_code)
        records, _ = build_daily_records(roster, absent, on_duty)
        return [
            {"regNo": s.reg_no, "name": s.name, "status": records[s.reg_no].value}
            for s in roster
        ]

    def day_stats(self, staff_code: str, date: str) -> DayStats:
        daily = self._attendance.get_by_date(staff_code, date)
        if not daily:
            return DayStats(date=date, present=0, absent=0, on_duty=0, total=0)
        return DayStats.of(daily)

    def recent_summaries(self, staff_code: str, *, limit: int = DEFAULT_RECENT_LIMIT) -> Sequence[DayStats]:
        """Most recently saved snapshots first."""
        saved = list(self._attendance.list_all(staff_code))
        return [DayStats.of(d) for d in reversed(saved[-limit:])] if limit > 0 else []
