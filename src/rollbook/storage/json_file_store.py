from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any
from urllib.parse import quote

from ..core.exceptions import StorageError
from .store import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """Key-value store keeping one UTF-8 JSON file per key in a folder."""

    def __init__(self, root: str | os.PathLike):
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    def _path(self, key: str) -> Path:
        # staff codes are user input; keep them from escaping the folder
        return self._root / f"{quote(key, safe='')}.json"

    def get(self, key: str, default: Any = None) -> Any:
        path = self._path(key)
        if not path.exists():
            return default
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read stored value for {key!r}") from e

    def set(self, key: str, value: Any) -> None:
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(prefix=".tmp-", suffix=".json", dir=self._root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f, ensure_ascii=False, indent=4)
            os.replace(tmp_name, path)
        except Exception:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise
        logger.debug("Stored key %s", key)

    def delete(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
            logger.debug("Deleted key %s", key)
