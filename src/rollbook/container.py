from __future__ import annotations

import os
from dataclasses import dataclass

from .attendance.kv_attendance_repository import KVAttendanceRepository
from .attendance.service import AttendanceService
from .reports.service import ReportService
from .roster.kv_roster_repository import KVRosterRepository
from .roster.service import RosterService
from .staff.kv_staff_repository import KVStaffRepository
from .staff.service import AccountService, AuthService
from .storage.json_file_store import JsonFileStore
from .storage.store import KeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    staff_repo: KVStaffRepository
    roster_repo: KVRosterRepository
    attendance_repo: KVAttendanceRepository

    auth_service: AuthService
    account_service: AccountService
    roster_service: RosterService
    attendance_service: AttendanceService
    report_service: ReportService


def build_container(*, data_dir: str | os.PathLike | None = None, store: KeyValueStore | None = None) -> Container:
    if store is None:
        if data_dir is None:
            raise ValueError("data_dir or store is required")
        store = JsonFileStore(data_dir)

    staff_repo = KVStaffRepository(store)
    roster_repo = KVRosterRepository(store)
    attendance_repo = KVAttendanceRepository(store)

    return Container(
        store=store,
        staff_repo=staff_repo,
        roster_repo=roster_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(staff_repo),
        account_service=AccountService(roster_repo, attendance_repo),
        roster_service=RosterService(roster_repo),
        attendance_service=AttendanceService(attendance_repo, roster_repo),
        report_service=ReportService(attendance_repo, roster_repo),
    )
