from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, List, Optional

from ..common.datetime_utils import format_hhmm, now_local
from ..core.constants import ABSENT_MARKER
from ..core.enums import AttendanceStatus, Collection
from ..session.snapshot import Snapshot, same_id
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        snapshot: Snapshot,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._snapshot = snapshot
        self._clock = clock

    def find_for(self, account_id: Any, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._snapshot.attendance:
            if same_id(r.account_id, account_id) and r.work_date == work_date:
                return r
        return None

    def auto_mark(self, account_id: Any, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        """Create today's record for ``account_id`` unless the snapshot already has one.

        Returns the created record, or None when the day was already marked.
        """
        now = now or self._clock()
        today = now.date()

        if self.find_for(account_id, today):
            return None

        ticket = self._snapshot.issue()
        record = self._attendance.create(
            {
                "userId": account_id,
                "date": today.isoformat(),
                "status": AttendanceStatus.PRESENT.value,
                "checkIn": format_hhmm(now),
                "checkOut": ABSENT_MARKER,
            }
        )
        self._snapshot.append(Collection.ATTENDANCE, ticket, record)
        logger.info("Marked attendance for account %s on %s", account_id, today)
        return record

    def records_for(self, account_id: Any = None) -> List[AttendanceRecord]:
        records = self._snapshot.attendance
        if account_id is None:
            return list(records)
        return [r for r in records if same_id(r.account_id, account_id)]

    def today_status(self, account_id: Any, *, today: Optional[date] = None) -> AttendanceStatus:
        record = self.find_for(account_id, today or self._clock().date())
        return record.status if record else AttendanceStatus.ABSENT

    def get_history_ui(self, account_id: Any = None) -> List[dict]:
        return [self._to_ui(r) for r in self.records_for(account_id)]

    def _to_ui(self, r: AttendanceRecord) -> dict:
        account = self._snapshot.find(Collection.ACCOUNTS, r.account_id)
        return {
            "id": r.record_id,
            "userId": r.account_id,
            "name": account.name if account else ABSENT_MARKER,
            "date": r.work_date.isoformat(),
            "checkIn": r.check_in,
            "checkOut": r.check_out,
            "workingHours": r.working_hours,
            "status": r.status.value,
        }
