from __future__ import annotations

from typing import Optional

import pytest

from rollbook.attendance.model import DailyAttendance
from rollbook.attendance.service import AttendanceService
from rollbook.core.enums import AttendanceStatus
from rollbook.core.exceptions import ValidationError
from rollbook.roster.model import Student


class InMemoryRosters:
    def __init__(self, rosters: Optional[dict] = None):
        self._rosters = rosters or {}

    def get(self, staff_code):
        return self._rosters.get(staff_code, [])


class InMemoryAttendance:
    def __init__(self):
        self._items: dict[str, list[DailyAttendance]] = {}

    def list_all(self, staff_code):
        return list(self._items.get(staff_code, []))

    def get_by_date(self, staff_code, date):
        for a in self._items.get(staff_code, []):
            if a.date == date:
                return a
        return None

    def save(self, attendance):
        kept = [a for a in self._items.get(attendance.staff_code, []) if a.date != attendance.date]
        kept.append(attendance)
        self._items[attendance.staff_code] = kept


def _service():
    roster = [
        Student(id="1", reg_no="101", name="Arun", staff_code="T01"),
        Student(id="2", reg_no="102", name="Ganesh", staff_code="T01"),
        Student(id="3", reg_no="103", name="Priya", staff_code="T01"),
    ]
    repo = InMemoryAttendance()
    return AttendanceService(repo, InMemoryRosters({"T01": roster})), repo


def test_saving_same_date_twice_replaces_snapshot():
    svc, repo = _service()

    svc.mark("T01", date="2024-01-01", absent="101")
    svc.mark("T01", date="2024-01-01", on_duty="102")

    saved = repo.list_all("T01")
    assert len(saved) == 1
    assert saved[0].records == {
        "101": AttendanceStatus.PRESENT,
        "102": AttendanceStatus.ON_DUTY,
        "103": AttendanceStatus.PRESENT,
    }


def test_mark_requires_date_and_roster():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.mark("T01", date="")
    with pytest.raises(ValidationError):
        svc.mark("T01", date="2024-1-1")
    with pytest.raises(ValidationError):
        svc.mark("NOBODY", date="2024-01-01")


def test_mark_reports_unknown_reg_numbers():
    svc, _ = _service()

    result = svc.mark("T01", date="2024-01-01", absent="101,555")

    assert result.unknown_reg_nos == ["555"]
    assert "555" not in result.attendance.records


def test_save_records_rejects_unknown_status():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.save_records("T01", date="2024-01-01", records={"101": "LATE"})

    daily = svc.save_records("T01", date="2024-01-01", records={"101": "OD"})
    assert daily.records == {"101": AttendanceStatus.ON_DUTY}


def test_load_saved_splits_lists():
    svc, _ = _service()
    svc.mark("T01", date="2024-01-02", absent="103", on_duty="101")

    saved = svc.load_saved("T01", "2024-01-02")

    assert saved.absent == ["103"]
    assert saved.on_duty == ["101"]
    with pytest.raises(ValidationError):
        svc.load_saved("T01", "2024-01-03")


def test_dashboard_stats():
    svc, _ = _service()
    svc.mark("T01", date="2024-01-01", absent="101")
    svc.mark("T01", date="2024-01-02", absent="101,102", on_duty="103")

    today = svc.day_stats("T01", "2024-01-02")
    assert (today.present, today.absent, today.on_duty, today.total) == (0, 2, 1, 3)
    assert svc.day_stats("T01", "2024-02-01").total == 0

    recent = svc.recent_summaries("T01", limit=5)
    assert [r.date for r in recent] == ["2024-01-02", "2024-01-01"]


def test_preview_does_not_save():
    svc, repo = _service()

    rows = svc.preview("T01", absent="102")

    assert [r["status"] for r in rows] == ["P", "AB", "P"]
    assert repo.list_all("T01") == []
