from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.enums import Collection
from ..store.repository import RecordStore, map_record, map_records
from .model import AttendanceRecord
from .repository import AttendanceRepository


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[AttendanceRecord]:
        rows = self._store.list_all(Collection.ATTENDANCE)
        return map_records(Collection.ATTENDANCE, rows, AttendanceRecord.from_record)

    def create(self, fields: Mapping[str, Any]) -> AttendanceRecord:
        row = self._store.create(Collection.ATTENDANCE, fields)
        return map_record(Collection.ATTENDANCE, row, AttendanceRecord.from_record)

    def delete_by_id(self, record_id: Any) -> None:
        self._store.delete_by_id(Collection.ATTENDANCE, record_id)
