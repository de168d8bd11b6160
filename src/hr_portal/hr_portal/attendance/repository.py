from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(self, fields: Mapping[str, Any]) -> AttendanceRecord:
        raise NotImplementedError

    def delete_by_id(self, record_id: Any) -> None:
        raise NotImplementedError
