from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .model import LeaveRequest


class LeaveRepository(Protocol):
    def list_all(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def create(self, fields: Mapping[str, Any]) -> LeaveRequest:
        raise NotImplementedError

    def update(self, leave_id: Any, record: Mapping[str, Any]) -> LeaveRequest:
        """Full-record replace; returns the server's copy."""

        raise NotImplementedError

    def delete_by_id(self, leave_id: Any) -> None:
        raise NotImplementedError
