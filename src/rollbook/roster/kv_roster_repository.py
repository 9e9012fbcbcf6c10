from __future__ import annotations

from typing import Sequence

from ..storage.store import KeyValueStore, roster_key
from .model import Student
from .repository import RosterRepository


class KVRosterRepository(RosterRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, staff_code: str) -> Sequence[Student]:
        return [Student.from_dict(row) for row in self._store.get(roster_key(staff_code), [])]

    def replace(self, staff_code: str, students: Sequence[Student]) -> None:
        self._store.set(roster_key(staff_code), [s.to_dict() for s in students])

    def delete(self, staff_code: str) -> None:
        self._store.delete(roster_key(staff_code))
