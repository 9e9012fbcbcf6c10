from __future__ import annotations

import pytest

from rollbook.core.exceptions import ValidationError
from rollbook.roster.kv_roster_repository import KVRosterRepository
from rollbook.roster.service import RosterService
from rollbook.storage.json_file_store import JsonFileStore


@pytest.fixture()
def service(tmp_path):
    return RosterService(KVRosterRepository(JsonFileStore(tmp_path)))


def test_import_replaces_stored_roster(service):
    service.import_csv("T01", "101,Arun\n102,Ganesh")
    service.import_csv("T01", "201,Priya")

    assert [s.reg_no for s in service.get_roster("T01")] == ["201"]


def test_failed_import_leaves_roster_untouched(service):
    service.import_csv("T01", "101,Arun")

    result = service.import_csv("T01", "301,X\n301,Y")

    assert not result.success
    assert [s.reg_no for s in service.get_roster("T01")] == ["101"]


def test_import_requires_input(service):
    with pytest.raises(ValidationError):
        service.import_csv("T01", "   ")


def test_rosters_are_kept_per_staff(service):
    service.import_csv("T01", "101,Arun")
    service.import_csv("T02", "101,Someone Else")

    assert service.get_roster("T01")[0].name == "Arun"
    assert service.get_roster("T02")[0].name == "Someone Else"


def test_remove_and_clear(service):
    service.import_csv("T01", "101,Arun\n102,Ganesh")

    service.remove_student("T01", "101")
    assert [s.reg_no for s in service.get_roster("T01")] == ["102"]

    with pytest.raises(ValidationError):
        service.remove_student("T01", "999")

    service.clear("T01")
    assert list(service.get_roster("T01")) == []


def test_export_requires_students(service):
    with pytest.raises(ValidationError):
        service.export_csv("T01")

    service.import_csv("T01", "101,Arun")
    assert service.export_csv("T01") == "101,Arun"
    assert service.export_filename("T01").startswith("roster_T01_")


def test_search_matches_reg_no_or_name(service):
    service.import_csv("T01", "101,Arun Kumar\n102,Ganesh Raj\nX7,Priya")

    assert [s.reg_no for s in service.search("T01", "raj")] == ["102"]
    assert [s.reg_no for s in service.search("T01", "x7")] == ["X7"]
    assert len(service.search("T01", "")) == 3


def test_import_rejects_non_text_input(service):
    with pytest.raises(ValidationError):
        service.import_csv("T01", 101)
    assert list(service.get_roster("T01")) == []
