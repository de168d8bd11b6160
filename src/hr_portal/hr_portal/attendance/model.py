from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping

from ..common.datetime_utils import parse_iso_date, working_hours
from ..core.constants import ABSENT_MARKER
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance entry per (account, day).

    ``check_in``/``check_out`` are ``HH:MM`` strings or the ``"-"`` marker.
    """

    record_id: Any
    account_id: Any
    work_date: date
    status: AttendanceStatus
    check_in: str = ABSENT_MARKER
    check_out: str = ABSENT_MARKER

    @property
    def working_hours(self) -> str:
        return working_hours(self.check_in, self.check_out)

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            record_id=r.get("id"),
            account_id=r.get("userId"),
            work_date=parse_iso_date(str(r.get("date"))[:10]),
            status=AttendanceStatus(r.get("status") or AttendanceStatus.PRESENT.value),
            check_in=str(r.get("checkIn") or ABSENT_MARKER),
            check_out=str(r.get("checkOut") or ABSENT_MARKER),
        )

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "userId": self.account_id,
            "date": self.work_date.isoformat(),
            "status": self.status.value,
            "checkIn": self.check_in,
            "checkOut": self.check_out,
        }
        if self.record_id is not None:
            record = {"id": self.record_id, **record}
        return record
