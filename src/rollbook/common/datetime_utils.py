from __future__ import annotations

import time
from datetime import date, datetime, timedelta
from typing import Iterator


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_iso() -> str:
    return date.today().strftime("%Y-%m-%d")


def month_start_iso() -> str:
    return date.today().replace(day=1).strftime("%Y-%m-%d")


def iter_iso_dates(start: str, end: str) -> Iterator[str]:
    """Yield every calendar day from start to end, both inclusive."""
    current = parse_iso_date(start)
    last = parse_iso_date(end)
    while current <= last:
        yield current.strftime("%Y-%m-%d")
        current += timedelta(days=1)


def now_millis() -> int:
    """Epoch milliseconds.

    Note: Wrapped so tests can patch/mock easier.
    """
    return int(time.time() * 1000)
