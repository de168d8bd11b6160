from __future__ import annotations

import pytest

from src.hr_portal.hr_portal.core.enums import Collection, LeaveStatus
from src.hr_portal.hr_portal.core.exceptions import TransportError, ValidationError

LEAVE = {"type": "Annual", "from": "2025-09-10", "to": "2025-09-12", "reason": "Family trip"}


def test_submit_creates_pending_leave(container, store):
    leave = container.leave_service.submit(2, LEAVE)

    assert leave.status == LeaveStatus.PENDING
    assert leave.days == 3
    assert store.data[Collection.LEAVES][-1]["appliedDate"] == "2025-08-30"
    assert store.data[Collection.LEAVES][-1]["userId"] == 2


def test_submit_rejects_reversed_dates(container):
    with pytest.raises(ValidationError):
        container.leave_service.submit(2, {**LEAVE, "from": "2025-09-12", "to": "2025-09-10"})


@pytest.mark.parametrize("field,value", [("type", ""), ("reason", " "), ("from", "10/09/2025"), ("to", None)])
def test_submit_validates_fields(container, field, value):
    with pytest.raises(ValidationError):
        container.leave_service.submit(2, {**LEAVE, field: value})


def test_failed_status_update_leaves_snapshot_unchanged(container, store):
    store.fail.add(("update", Collection.LEAVES, 30))

    with pytest.raises(TransportError):
        container.leave_service.set_status(30, LeaveStatus.APPROVED)

    assert container.snapshot.find(Collection.LEAVES, 30).status == LeaveStatus.PENDING


def test_for_account_filters_by_owner(container):
    container.leave_service.submit(1, LEAVE)

    assert [leave.account_id for leave in container.leave_service.for_account(2)] == [2]
    assert len(container.leave_service.for_account()) == 2
