from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Student:
    """Domain entity: one roster entry. Created on import, never edited."""

    id: str
    reg_no: str
    name: str
    staff_code: str

    def to_dict(self) -> dict:
        return {"id": self.id, "regNo": self.reg_no, "name": self.name, "staffCode": self.staff_code}

    @classmethod
    def from_dict(cls, data: dict) -> "Student":
        return cls(
            id=str(data["id"]),
            reg_no=str(data["regNo"]),
            name=str(data["name"]),
            staff_code=str(data["staffCode"]),
        )


@dataclass(frozen=True)
class RosterImportResult:
    """Outcome of one CSV import: either every student or every error."""

    success: bool
    students: list[Student] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
