from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import requests

from ..core.constants import DEFAULT_STORE_TIMEOUT
from ..core.enums import Collection


@dataclass
class StoreConfig:
    base_url: str
    timeout: float = DEFAULT_STORE_TIMEOUT
    collection_paths: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "StoreConfig":
        return cls(
            base_url=str(raw["base_url"]),
            timeout=float(raw.get("timeout", DEFAULT_STORE_TIMEOUT)),
            collection_paths={str(k): str(v) for k, v in dict(raw.get("collection_paths") or {}).items()},
        )

    def path_for(self, collection: Collection) -> str:
        return self.collection_paths.get(collection.value, collection.value).strip("/")


class StoreConnection:
    """Singleton-like HTTP session factory for the remote store.

    Note: One ``requests.Session`` is shared so connections are pooled.
    """

    _instance: Optional["StoreConnection"] = None

    def __init__(self, config: StoreConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session

    @classmethod
    def get_instance(cls, config: StoreConfig) -> "StoreConnection":
        if cls._instance is None:
            cls._instance = StoreConnection(config)
        return cls._instance

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def timeout(self) -> float:
        return self._config.timeout

    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Accept": "application/json"})
        return self._session

    def url_for(self, collection: Collection, record_id: Any = None) -> str:
        url = f"{self._config.base_url.rstrip('/')}/{self._config.path_for(collection)}"
        if record_id is not None:
            url = f"{url}/{record_id}"
        return url

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
