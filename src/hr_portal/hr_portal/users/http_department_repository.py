from __future__ import annotations

from typing import Sequence

from ..core.enums import Collection
from ..store.repository import RecordStore, map_records
from .department_model import Department
from .department_repository import DepartmentRepository


class HttpDepartmentRepository(DepartmentRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Department]:
        return map_records(Collection.DEPARTMENTS, self._store.list_all(Collection.DEPARTMENTS), Department.from_record)
