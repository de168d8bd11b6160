from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date, parse_optional_date
from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    leave_id: Any
    account_id: Any
    leave_type: str
    from_date: date
    to_date: date
    reason: str
    status: LeaveStatus
    applied_date: Optional[date] = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def days(self) -> int:
        return (self.to_date - self.from_date).days + 1

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "LeaveRequest":
        return cls(
            leave_id=r.get("id"),
            account_id=r.get("userId"),
            leave_type=str(r.get("type") or ""),
            from_date=parse_iso_date(str(r.get("from"))[:10]),
            to_date=parse_iso_date(str(r.get("to"))[:10]),
            reason=str(r.get("reason") or ""),
            status=LeaveStatus(r.get("status") or LeaveStatus.PENDING.value),
            applied_date=parse_optional_date(r.get("appliedDate")),
            raw=dict(r),
        )

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "userId": self.account_id,
            "type": self.leave_type,
            "from": self.from_date.isoformat(),
            "to": self.to_date.isoformat(),
            "reason": self.reason,
            "status": self.status.value,
            "appliedDate": format_iso_date(self.applied_date),
        }
        if self.leave_id is not None:
            record = {"id": self.leave_id, **record}
        return record

    def patched_record(self, changes: Mapping[str, Any]) -> Dict[str, Any]:
        record = dict(self.raw) if self.raw else self.to_record()
        record.update(changes)
        return record
