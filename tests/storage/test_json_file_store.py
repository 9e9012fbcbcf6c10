from __future__ import annotations

import pytest

from rollbook.attendance.kv_attendance_repository import KVAttendanceRepository
from rollbook.attendance.model import DailyAttendance
from rollbook.core.enums import AttendanceStatus
from rollbook.core.exceptions import StorageError
from rollbook.staff.kv_staff_repository import KVStaffRepository
from rollbook.staff.model import Staff
from rollbook.storage.json_file_store import JsonFileStore


def test_get_set_delete(tmp_path):
    store = JsonFileStore(tmp_path)

    assert store.get("roster_T01", []) == []
    store.set("roster_T01", [{"regNo": "101"}])
    assert store.get("roster_T01") == [{"regNo": "101"}]

    store.set("roster_T01", [])
    assert store.get("roster_T01") == []

    store.delete("roster_T01")
    assert store.get("roster_T01") is None
    store.delete("roster_T01")


def test_values_survive_a_new_store_instance(tmp_path):
    JsonFileStore(tmp_path).set("currentUser", {"code": "T01"})

    assert JsonFileStore(tmp_path).get("currentUser") == {"code": "T01"}


def test_keys_cannot_escape_the_folder(tmp_path):
    store = JsonFileStore(tmp_path / "data")
    store.set("roster_../../evil", [1])

    assert store.get("roster_../../evil") == [1]
    assert list((tmp_path / "data").iterdir())[0].parent == tmp_path / "data"
    assert not (tmp_path / "evil.json").exists()


def test_corrupt_file_raises(tmp_path):
    store = JsonFileStore(tmp_path)
    (tmp_path / "staff_accounts.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageError):
        store.get("staff_accounts")


def test_staff_repository_replaces_by_code(tmp_path):
    repo = KVStaffRepository(JsonFileStore(tmp_path))

    repo.save(Staff(id="a", code="T01", password="one"))
    repo.save(Staff(id="b", code="T02", password="two"))
    repo.save(Staff(id="c", code="T01", password="three"))

    assert [s.code for s in repo.list_all()] == ["T02", "T01"]
    assert repo.get_by_code("T01").password == "three"


def test_attendance_repository_round_trip_and_range(tmp_path):
    repo = KVAttendanceRepository(JsonFileStore(tmp_path))
    for day in ("2024-01-01", "2024-01-05", "2024-02-01"):
        repo.save(DailyAttendance(date=day, staff_code="T01", records={"101": AttendanceStatus.ON_DUTY}))

    assert repo.get_by_date("T01", "2024-01-05").records == {"101": AttendanceStatus.ON_DUTY}
    assert [a.date for a in repo.list_in_range("T01", "2024-01-01", "2024-01-31")] == ["2024-01-01", "2024-01-05"]

    repo.delete_all("T01")
    assert list(repo.list_all("T01")) == []
