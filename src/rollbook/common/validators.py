from __future__ import annotations

import re
from datetime import datetime

from ..core.exceptions import ValidationError

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def require_text(value, field_name: str) -> str:
    """Return ``value`` as text; missing means empty, anything else is rejected."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: str, field_name: str = "Date") -> str:
    """Accept only zero-padded ``yyyy-mm-dd`` strings naming a real day.

    Dates are compared as plain strings everywhere else, which is only
    correct for this fixed-width form.
    """
    value = require_text(value, field_name).strip()
    if not value:
        raise ValidationError(f"Please select {field_name.lower()}!")
    if not _ISO_DATE_RE.match(value):
        raise ValidationError(f"{field_name} must use the YYYY-MM-DD format")
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid calendar date")
    return value


def require_date_range(start: str, end: str) -> tuple[str, str]:
    start = require_text(start, "Start date")
    end = require_text(end, "End date")
    if not start.strip() or not end.strip():
        raise ValidationError("Please select both start and end dates!")
    start = require_iso_date(start, "Start date")
    end = require_iso_date(end, "End date")
    if start > end:
        raise ValidationError("Start date must not be after end date")
    return start, end
