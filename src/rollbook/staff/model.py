from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Staff:
    """Domain entity: a staff account.

    Note: ``code`` is both the login identifier and the partition key for
    the staff member's roster and attendance.
    """

    id: str
    code: str
    password: str

    def to_dict(self) -> dict:
        return {"id": self.id, "code": self.code, "password": self.password}

    @classmethod
    def from_dict(cls, data: dict) -> "Staff":
        return cls(id=str(data["id"]), code=str(data["code"]), password=str(data["password"]))
