from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from ..core.constants import SESSION_KEY

logger = logging.getLogger(__name__)


class SessionStorage(Protocol):
    """Durable storage for the serialized current account (one key)."""

    def read(self) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def write(self, record: Dict[str, Any]) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class JsonFileSessionStorage(SessionStorage):
    def __init__(self, path: str | Path, *, key: str = SESSION_KEY):
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _dump(self, data: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp, self._path)

    def read(self) -> Optional[Dict[str, Any]]:
        record = self._load().get(self._key)
        return record if isinstance(record, dict) else None

    def write(self, record: Dict[str, Any]) -> None:
        data = self._load()
        data[self._key] = record
        self._dump(data)

    def clear(self) -> None:
        data = self._load()
        if self._key not in data:
            return
        data.pop(self._key)
        if data:
            self._dump(data)
        else:
            self._path.unlink(missing_ok=True)
