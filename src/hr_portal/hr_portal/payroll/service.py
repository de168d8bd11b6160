from __future__ import annotations

from typing import Any, Iterable, List, Optional

from ..session.snapshot import Snapshot, same_id
from .model import PayrollRecord


def total_net_pay(records: Iterable[PayrollRecord]) -> float:
    return sum((r.net_pay for r in records), 0.0)


class PayrollService:
    """Read-side views over the payroll snapshot."""

    def __init__(self, snapshot: Snapshot):
        self._snapshot = snapshot

    def for_account(self, account_id: Any = None) -> List[PayrollRecord]:
        records = self._snapshot.payroll
        if account_id is None:
            return list(records)
        return [r for r in records if same_id(r.account_id, account_id)]

    def latest_for(self, account_id: Any) -> Optional[PayrollRecord]:
        records = self.for_account(account_id)
        return records[-1] if records else None
