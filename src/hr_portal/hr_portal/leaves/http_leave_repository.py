from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.enums import Collection
from ..store.repository import RecordStore, map_record, map_records
from .model import LeaveRequest
from .repository import LeaveRepository


class HttpLeaveRepository(LeaveRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[LeaveRequest]:
        return map_records(Collection.LEAVES, self._store.list_all(Collection.LEAVES), LeaveRequest.from_record)

    def create(self, fields: Mapping[str, Any]) -> LeaveRequest:
        return map_record(Collection.LEAVES, self._store.create(Collection.LEAVES, fields), LeaveRequest.from_record)

    def update(self, leave_id: Any, record: Mapping[str, Any]) -> LeaveRequest:
        row = self._store.update_by_id(Collection.LEAVES, leave_id, record)
        return map_record(Collection.LEAVES, row, LeaveRequest.from_record)

    def delete_by_id(self, leave_id: Any) -> None:
        self._store.delete_by_id(Collection.LEAVES, leave_id)
