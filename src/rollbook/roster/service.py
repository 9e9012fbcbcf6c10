from __future__ import annotations

import logging
from typing import Sequence

from ..common.datetime_utils import today_iso
from ..common.validators import require_text
from ..core.exceptions import NotFoundError, ValidationError
from .csv_importer import export_roster_csv, parse_roster_csv
from .model import RosterImportResult, Student
from .repository import RosterRepository

logger = logging.getLogger(__name__)


class RosterService:
    def __init__(self, rosters: RosterRepository):
        self._rosters = rosters

    def get_roster(self, staff_code: str) -> Sequence[Student]:
        return self._rosters.get(staff_code)

    def import_csv(self, staff_code: str, csv_data: str) -> RosterImportResult:
        """Replace the stored roster with a validated CSV batch.

        A failed batch leaves the stored roster untouched.
        """
        csv_data = require_text(csv_data, "CSV data")
        if not csv_data.strip():
            raise ValidationError("Please paste CSV data first!")

        result = parse_roster_csv(csv_data, staff_code)
        if result.success:
            self._rosters.replace(staff_code, result.students)
            logger.info("Imported %d students for staff %s", len(result.students), staff_code)
        else:
            logger.info("Rejected roster import for staff %s with %d errors", staff_code, len(result.errors))
        return result

    def export_csv(self, staff_code: str) -> str:
        roster = self._rosters.get(staff_code)
        if not roster:
            raise ValidationError("No roster data to export!")
        return export_roster_csv(roster)

    def export_filename(self, staff_code: str) -> str:
        return f"roster_{staff_code}_{today_iso()}.csv"

    def remove_student(self, staff_code: str, reg_no: str) -> None:
        roster = list(self._rosters.get(staff_code))
        remaining = [s for s in roster if s.reg_no != reg_no]
        if len(remaining) == len(roster):
            raise NotFoundError(f"Student {reg_no} is not in the roster")
        self._rosters.replace(staff_code, remaining)

    def clear(self, staff_code: str) -> None:
        self._rosters.replace(staff_code, [])

    def search(self, staff_code: str, term: str) -> Sequence[Student]:
        roster = self._rosters.get(staff_code)
        if not term:
            return roster
        term = term.lower()
        return [s for s in roster if term in s.reg_no.lower() or term in s.name.lower()]
