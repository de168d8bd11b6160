from __future__ import annotations

from typing import Any, Sequence

from ..core.enums import Collection
from ..store.repository import RecordStore, map_records
from .model import PayrollRecord
from .repository import PayrollRepository


class HttpPayrollRepository(PayrollRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[PayrollRecord]:
        return map_records(Collection.PAYROLL, self._store.list_all(Collection.PAYROLL), PayrollRecord.from_record)

    def delete_by_id(self, payroll_id: Any) -> None:
        self._store.delete_by_id(Collection.PAYROLL, payroll_id)
