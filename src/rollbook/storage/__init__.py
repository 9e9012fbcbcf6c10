from .json_file_store import JsonFileStore
from .store import KeyValueStore, attendance_key, roster_key

__all__ = ["JsonFileStore", "KeyValueStore", "attendance_key", "roster_key"]
