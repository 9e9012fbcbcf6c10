from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class RosterRepository(Protocol):
    def get(self, staff_code: str) -> Sequence[Student]:
        raise NotImplementedError

    def replace(self, staff_code: str, students: Sequence[Student]) -> None:
        raise NotImplementedError

    def delete(self, staff_code: str) -> None:
        raise NotImplementedError
