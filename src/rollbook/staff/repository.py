from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Staff


class StaffRepository(Protocol):
    def list_all(self) -> Sequence[Staff]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[Staff]:
        raise NotImplementedError

    def save(self, staff: Staff) -> None:
        """Insert or replace the account with the same code."""

        raise NotImplementedError

    def get_current(self) -> Optional[Staff]:
        raise NotImplementedError

    def set_current(self, staff: Staff) -> None:
        raise NotImplementedError

    def clear_current(self) -> None:
        raise NotImplementedError
