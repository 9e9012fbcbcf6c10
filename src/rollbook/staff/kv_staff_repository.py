from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import CURRENT_USER_KEY, STAFF_ACCOUNTS_KEY
from ..storage.store import KeyValueStore
from .model import Staff
from .repository import StaffRepository


class KVStaffRepository(StaffRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_all(self) -> Sequence[Staff]:
        return [Staff.from_dict(row) for row in self._store.get(STAFF_ACCOUNTS_KEY, [])]

    def get_by_code(self, code: str) -> Optional[Staff]:
        for staff in self.list_all():
            if staff.code == code:
                return staff
        return None

    def save(self, staff: Staff) -> None:
        others = [s for s in self.list_all() if s.code != staff.code]
        others.append(staff)
        self._store.set(STAFF_ACCOUNTS_KEY, [s.to_dict() for s in others])

    def get_current(self) -> Optional[Staff]:
        data = self._store.get(CURRENT_USER_KEY)
        return Staff.from_dict(data) if data else None

    def set_current(self, staff: Staff) -> None:
        self._store.set(CURRENT_USER_KEY, staff.to_dict())

    def clear_current(self) -> None:
        self._store.delete(CURRENT_USER_KEY)
