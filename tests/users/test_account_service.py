from __future__ import annotations

from datetime import date

import pytest

from src.hr_portal.hr_portal.common.passwords import is_password_hash, verify_password
from src.hr_portal.hr_portal.core.enums import AccountStatus, Collection, Role
from src.hr_portal.hr_portal.core.exceptions import NotFoundError, TransportError, ValidationError

NEW_EMPLOYEE = {
    "username": "bob",
    "password": "bob12345",
    "name": "Bob Smith",
    "email": "bob@example.com",
    "phone": "555-0101",
    "department": "Engineering",
    "position": "Tester",
}


def test_register_applies_employee_defaults(container, store):
    account = container.account_service.register({**NEW_EMPLOYEE, "role": "admin", "salary": 999999})

    assert account.role == Role.EMPLOYEE
    assert account.salary == 50000
    assert account.status == AccountStatus.ACTIVE
    assert account.leave_allowance == 12
    assert account.used_leaves == 0
    assert account.join_date == date(2025, 8, 30)
    assert account.avatar_url == "https://ui-avatars.com/api/?name=Bob+Smith&background=random&color=fff"
    assert account in container.snapshot.accounts
    assert store.data[Collection.ACCOUNTS][-1]["username"] == "bob"


def test_register_stores_a_password_hash(container, store):
    container.account_service.register(NEW_EMPLOYEE)

    stored = store.data[Collection.ACCOUNTS][-1]["password"]
    assert is_password_hash(stored)
    assert verify_password(stored, "bob12345")


def test_registered_account_can_log_in(container):
    container.session_manager.register(NEW_EMPLOYEE)

    assert container.session_manager.login("bob", "bob12345").name == "Bob Smith"


@pytest.mark.parametrize("missing", ["username", "password", "name"])
def test_register_requires_core_fields(container, missing):
    with pytest.raises(ValidationError):
        container.account_service.register({**NEW_EMPLOYEE, missing: "  "})


def test_add_account_keeps_role_and_defaults_bad_salary(container):
    admin = container.account_service.add_account({**NEW_EMPLOYEE, "role": "admin", "salary": "abc"})

    assert admin.role == Role.ADMIN
    assert admin.salary == 50000


def test_add_account_parses_salary(container):
    account = container.account_service.add_account({**NEW_EMPLOYEE, "salary": "62000"})

    assert account.role == Role.EMPLOYEE
    assert account.salary == 62000


def test_add_account_rejects_unknown_role(container):
    with pytest.raises(ValidationError):
        container.account_service.add_account({**NEW_EMPLOYEE, "role": "owner"})


def test_failed_create_leaves_snapshot_unchanged(container, store):
    store.fail.add(("create", Collection.ACCOUNTS))

    with pytest.raises(TransportError):
        container.account_service.register(NEW_EMPLOYEE)

    assert len(container.snapshot.accounts) == 2


def test_update_account_merges_editable_fields(container, store):
    updated = container.account_service.update_account(
        2, {"name": "", "position": "Senior Developer", "salary": "", "status": "inactive", "password": "hacked"}
    )

    assert updated.name == "Jane Doe"
    assert updated.position == "Senior Developer"
    assert updated.salary == 50000
    assert updated.status == AccountStatus.INACTIVE
    assert store.data[Collection.ACCOUNTS][1]["password"] == "jane123"
    assert container.snapshot.find(Collection.ACCOUNTS, 2) == updated


def test_update_unknown_account(container):
    with pytest.raises(NotFoundError):
        container.account_service.update_account(42, {"name": "X"})


def test_employee_code_and_remaining_leaves(container):
    jane = container.snapshot.find(Collection.ACCOUNTS, 2)

    assert jane.employee_code == "EMP0002"
    assert jane.remaining_leaves == 9
