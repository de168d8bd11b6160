from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, List, Mapping

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import require_choice, require_non_empty
from ..core.enums import Collection, LeaveStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..session.snapshot import Snapshot, same_id
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(
        self,
        leaves: LeaveRepository,
        snapshot: Snapshot,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._leaves = leaves
        self._snapshot = snapshot
        self._clock = clock

    @staticmethod
    def _parse_date(value: Any, field_name: str):
        v = require_non_empty(value, field_name)
        try:
            return parse_iso_date(v)
        except ValueError:
            raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")

    def submit(self, account_id: Any, fields: Mapping[str, Any]) -> LeaveRequest:
        leave_type = require_non_empty(fields.get("type"), "Leave type")
        from_date = self._parse_date(fields.get("from"), "From date")
        to_date = self._parse_date(fields.get("to"), "To date")
        reason = require_non_empty(fields.get("reason"), "Reason")

        if to_date < from_date:
            raise ValidationError("To date must be on or after the from date")

        ticket = self._snapshot.issue()
        leave = self._leaves.create(
            {
                "userId": account_id,
                "type": leave_type,
                "from": from_date.isoformat(),
                "to": to_date.isoformat(),
                "reason": reason,
                "status": LeaveStatus.PENDING.value,
                "appliedDate": self._clock().date().isoformat(),
            }
        )
        self._snapshot.append(Collection.LEAVES, ticket, leave)
        logger.info("Account %s submitted leave %s", account_id, leave.leave_id)
        return leave

    def set_status(self, leave_id: Any, status: Any) -> LeaveRequest:
        """Approve or reject a pending request; only ``status`` changes."""
        new_status = require_choice(status, LeaveStatus, "Leave status")
        if new_status == LeaveStatus.PENDING:
            raise ValidationError("Leave status can only be set to approved or rejected")

        leave = self._snapshot.find(Collection.LEAVES, leave_id)
        if leave is None:
            raise NotFoundError(Collection.LEAVES, leave_id)
        if leave.status != LeaveStatus.PENDING:
            raise ValidationError(f"Leave request is already {leave.status.value}")

        ticket = self._snapshot.issue()
        saved = self._leaves.update(leave.leave_id, leave.patched_record({"status": new_status.value}))
        self._snapshot.replace(Collection.LEAVES, ticket, saved)
        logger.info("Leave %s set to %s", leave_id, new_status.value)
        return saved

    def for_account(self, account_id: Any = None) -> List[LeaveRequest]:
        leaves = self._snapshot.leaves
        if account_id is None:
            return list(leaves)
        return [leave for leave in leaves if same_id(leave.account_id, account_id)]
