from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import now_millis
from .model import RosterImportResult, Student


def parse_roster_csv(csv_data: str, staff_code: str) -> RosterImportResult:
    """Parse ``regNo,name`` lines into students for ``staff_code``.

    The whole batch is validated before anything is returned: a single bad
    line fails the import and no students come back. Blank lines are
    skipped, fields beyond the second are ignored and reg numbers must be
    unique within the batch. Line numbers in errors are 1-based.
    """
    if not csv_data or not csv_data.strip():
        return RosterImportResult(success=False, errors=["CSV data is empty"])

    students: list[Student] = []
    errors: list[str] = []
    seen: set[str] = set()
    stamp = now_millis()

    for line_no, line in enumerate(csv_data.strip().split("\n"), start=1):
        line = line.strip()
        if not line:
            continue

        parts = [part.strip() for part in line.split(",")]
        if len(parts) < 2:
            errors.append(f"Line {line_no}: Missing data. Expected format: RegNo,Name")
            continue

        reg_no, name = parts[0], parts[1]
        if not reg_no:
            errors.append(f"Line {line_no}: Registration number is empty")
            continue
        if not name:
            errors.append(f"Line {line_no}: Student name is empty")
            continue
        if reg_no in seen:
            errors.append(f"Line {line_no}: Duplicate registration number: {reg_no}")
            continue

        seen.add(reg_no)
        students.append(
            Student(id=f"{staff_code}_{reg_no}_{stamp}", reg_no=reg_no, name=name, staff_code=staff_code)
        )

    if not students and not errors:
        errors.append("No valid student data found")

    if errors:
        return RosterImportResult(success=False, errors=errors)
    return RosterImportResult(success=True, students=students)


def export_roster_csv(students: Iterable[Student]) -> str:
    """Serialize students back to ``regNo,name`` lines."""
    return "\n".join(f"{s.reg_no},{s.name}" for s in students)
