from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_millis
from ..common.validators import require_text
from ..core.exceptions import AuthenticationError, ValidationError
from ..roster.repository import RosterRepository
from .model import Staff
from .repository import StaffRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignInResult:
    staff: Staff
    created: bool


class AuthService:
    """Use case: sign in (creating the account on first use) and sign out."""

    def __init__(self, staff: StaffRepository):
        self._staff = staff

    def sign_in(self, code: str, password: str) -> SignInResult:
        code = require_text(code, "Staff code").strip()
        password = require_text(password, "Password")
        if not code or not password.strip():
            raise ValidationError("Please enter both staff code and password")

        existing = self._staff.get_by_code(code)
        if existing:
            if existing.password != password:
                logger.info("Rejected sign-in for staff %s", code)
                raise AuthenticationError("Invalid password")
            self._staff.set_current(existing)
            return SignInResult(staff=existing, created=False)

        staff = Staff(id=f"staff_{code}_{now_millis()}", code=code, password=password)
        self._staff.save(staff)
        self._staff.set_current(staff)
        logger.info("Created staff account %s", code)
        return SignInResult(staff=staff, created=True)

    def current_user(self) -> Optional[Staff]:
        return self._staff.get_current()

    def sign_out(self) -> None:
        self._staff.clear_current()


class AccountService:
    """Use case: wipe everything a staff member has stored."""

    def __init__(self, rosters: RosterRepository, attendance: AttendanceRepository):
        self._rosters = rosters
        self._attendance = attendance

    def clear_all_data(self, staff_code: str) -> None:
        self._rosters.delete(staff_code)
        self._attendance.delete_all(staff_code)
        logger.info("Cleared roster and attendance for staff %s", staff_code)
