from __future__ import annotations

from typing import Any, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def list_all(self) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def delete_by_id(self, payroll_id: Any) -> None:
        raise NotImplementedError
