from __future__ import annotations

import logging

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_date_range
from ..core.constants import EXPORT_FAILED_MESSAGE
from ..core.exceptions import ExportError, ValidationError
from ..roster.repository import RosterRepository
from .aggregator import aggregate_attendance
from .excel_export import build_attendance_workbook, export_filename
from .model import ExportOptions, StudentSummary

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(self, attendance: AttendanceRepository, rosters: RosterRepository):
        self._attendance = attendance
        self._rosters = rosters

    def build_report(self, staff_code: str, *, start: str, end: str) -> list[StudentSummary]:
        start, end = require_date_range(start, end)
        roster = self._rosters.get(staff_code)
        snapshots = self._attendance.list_in_range(staff_code, start, end)
        return aggregate_attendance(roster, snapshots, start, end)

    def export_excel(
        self,
        staff_code: str,
        *,
        start: str,
        end: str,
        options: ExportOptions | None = None,
    ) -> tuple[str, bytes]:
        """Return ``(filename, xlsx bytes)`` for the date range.

        Missing preconditions raise ValidationError; anything going wrong
        while writing is reported as a generic ExportError.
        """
        start, end = require_date_range(start, end)
        if not self._rosters.get(staff_code):
            raise ValidationError("No roster data available for export!")

        try:
            summaries = self.build_report(staff_code, start=start, end=end)
            content = build_attendance_workbook(summaries, start, end, options)
        except Exception as e:
            logger.exception("Excel export failed for %s (%s to %s)", staff_code, start, end)
            raise ExportError(EXPORT_FAILED_MESSAGE) from e

        return export_filename(staff_code, start, end), content
