from __future__ import annotations

import pytest

from rollbook.attendance.model import DailyAttendance
from rollbook.core.enums import AttendanceStatus
from rollbook.core.exceptions import ExportError, ValidationError
from rollbook.reports import service as report_service_module
from rollbook.reports.service import ReportService
from rollbook.roster.model import Student


class FakeRosters:
    def __init__(self, students):
        self._students = students

    def get(self, staff_code):
        return self._students


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def list_in_range(self, staff_code, start, end):
        self.last_args = {"staff_code": staff_code, "start": start, "end": end}
        return [r for r in self._rows if start <= r.date <= end]


def _roster():
    return [
        Student(id="1", reg_no="101", name="Arun", staff_code="T01"),
        Student(id="2", reg_no="102", name="Ganesh", staff_code="T01"),
    ]


def test_report_counts_explicit_entries():
    repo = FakeAttendanceRepo(
        [DailyAttendance(date="2024-01-01", staff_code="T01", records={"101": AttendanceStatus.ABSENT})]
    )
    svc = ReportService(repo, FakeRosters(_roster()))

    s101, s102 = svc.build_report("T01", start="2024-01-01", end="2024-01-01")

    assert s101.total_absent == 1
    assert (s102.total_present, s102.total_absent, s102.total_on_duty) == (0, 0, 0)
    assert repo.last_args == {"staff_code": "T01", "start": "2024-01-01", "end": "2024-01-01"}


def test_report_validates_range():
    svc = ReportService(FakeAttendanceRepo([]), FakeRosters(_roster()))

    with pytest.raises(ValidationError):
        svc.build_report("T01", start="", end="2024-01-01")
    with pytest.raises(ValidationError):
        svc.build_report("T01", start="2024-02-01", end="2024-01-01")
    with pytest.raises(ValidationError):
        svc.build_report("T01", start="2024-02-30", end="2024-03-01")


def test_export_requires_roster():
    svc = ReportService(FakeAttendanceRepo([]), FakeRosters([]))

    with pytest.raises(ValidationError):
        svc.export_excel("T01", start="2024-01-01", end="2024-01-31")


def test_export_returns_named_workbook():
    svc = ReportService(FakeAttendanceRepo([]), FakeRosters(_roster()))

    filename, content = svc.export_excel("T01", start="2024-01-01", end="2024-01-07")

    assert filename == "attendance_T01_2024-01-01_to_2024-01-07.xlsx"
    assert content[:2] == b"PK"


def test_export_failure_is_generic(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(report_service_module, "build_attendance_workbook", boom)
    svc = ReportService(FakeAttendanceRepo([]), FakeRosters(_roster()))

    with pytest.raises(ExportError) as exc:
        svc.export_excel("T01", start="2024-01-01", end="2024-01-07")

    assert str(exc.value) == "Failed to export Excel report. Please try again."
