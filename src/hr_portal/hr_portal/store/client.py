from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from ..core.enums import Collection
from .connection import StoreConnection
from .http_base import check_response, json_list, json_record, store_request
from .repository import RecordStore

logger = logging.getLogger(__name__)


class RemoteStoreClient(RecordStore):
    """HTTP client for a collection-oriented store (json-server style).

    ``GET /{c}``, ``POST /{c}``, ``PUT /{c}/{id}``, ``DELETE /{c}/{id}``.
    No retries: the first failure is raised to the caller.
    """

    def __init__(self, conn: StoreConnection):
        self._conn = conn

    def list_all(self, collection: Collection) -> List[Dict[str, Any]]:
        with store_request(collection, "list"):
            resp = self._conn.session().get(self._conn.url_for(collection), timeout=self._conn.timeout)
        records = json_list(check_response(resp, collection), collection)
        logger.debug("Loaded %d %s record(s)", len(records), collection.value)
        return records

    def create(self, collection: Collection, fields: Mapping[str, Any]) -> Dict[str, Any]:
        payload = {k: v for k, v in dict(fields).items() if k != "id"}
        with store_request(collection, "create"):
            resp = self._conn.session().post(self._conn.url_for(collection), json=payload, timeout=self._conn.timeout)
        record = json_record(check_response(resp, collection), collection)
        logger.info("Created %s record %s", collection.value, record.get("id"))
        return record

    def update_by_id(self, collection: Collection, record_id: Any, record: Mapping[str, Any]) -> Dict[str, Any]:
        with store_request(collection, "update"):
            resp = self._conn.session().put(
                self._conn.url_for(collection, record_id), json=dict(record), timeout=self._conn.timeout
            )
        updated = json_record(check_response(resp, collection, record_id=record_id), collection)
        logger.info("Updated %s record %s", collection.value, record_id)
        return updated

    def delete_by_id(self, collection: Collection, record_id: Any) -> None:
        with store_request(collection, "delete"):
            resp = self._conn.session().delete(self._conn.url_for(collection, record_id), timeout=self._conn.timeout)
        check_response(resp, collection, record_id=record_id)
        logger.info("Deleted %s record %s", collection.value, record_id)
