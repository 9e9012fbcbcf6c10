from __future__ import annotations

from typing import Any, Protocol

from ..core.constants import ATTENDANCE_KEY_PREFIX, ROSTER_KEY_PREFIX


class KeyValueStore(Protocol):
    """Narrow read/write boundary for all durable state.

    Repositories receive a store instance explicitly; values are plain
    JSON-compatible data and every ``set`` overwrites the whole key.
    """

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


def roster_key(staff_code: str) -> str:
    return f"{ROSTER_KEY_PREFIX}_{staff_code}"


def attendance_key(staff_code: str) -> str:
    return f"{ATTENDANCE_KEY_PREFIX}_{staff_code}"
