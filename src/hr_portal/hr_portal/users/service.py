from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping
from urllib.parse import quote_plus

from ..common.datetime_utils import now_local
from ..common.passwords import hash_password, verify_password
from ..common.validators import optional_text, parse_amount, require_choice, require_non_empty
from ..core.constants import AVATAR_URL_TEMPLATE, DEFAULT_LEAVE_ALLOWANCE, DEFAULT_SALARY
from ..core.enums import AccountStatus, Collection, Role
from ..core.exceptions import AuthServiceUnavailable, InvalidCredentials, NotFoundError, StoreError
from ..session.snapshot import Snapshot
from .model import Account
from .repository import AccountRepository

logger = logging.getLogger(__name__)

_EDITABLE_TEXT_FIELDS = ("name", "email", "phone", "department", "position")


class AuthService:
    """Use case: authenticate against the full account list."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts

    def authenticate(self, username: str, password: str) -> Account:
        try:
            accounts = self._accounts.list_all()
        except StoreError as e:
            logger.error("Login for %r failed, account list unavailable: %s", username, e)
            raise AuthServiceUnavailable("Login failed. Please try again.") from e

        for account in accounts:
            if account.username == username and verify_password(account.password, password):
                logger.info("Account %s logged in", account.account_id)
                return account

        logger.info("Rejected login for %r", username)
        raise InvalidCredentials("Invalid username or password")


class AccountService:
    """Use case: create and edit accounts, keeping the snapshot patched."""

    def __init__(
        self,
        accounts: AccountRepository,
        snapshot: Snapshot,
        *,
        clock: Callable = now_local,
    ):
        self._accounts = accounts
        self._snapshot = snapshot
        self._clock = clock

    def _new_account_fields(self, fields: Mapping[str, Any], *, role: Role, salary: float) -> Dict[str, Any]:
        username = require_non_empty(fields.get("username"), "Username")
        password = require_non_empty(fields.get("password"), "Password")
        name = require_non_empty(fields.get("name"), "Name")

        return {
            "username": username,
            "password": hash_password(password),
            "role": role.value,
            "name": name,
            "email": optional_text(fields.get("email")),
            "phone": optional_text(fields.get("phone")),
            "department": optional_text(fields.get("department")),
            "position": optional_text(fields.get("position")),
            "joinDate": self._clock().date().isoformat(),
            "salary": salary,
            "status": AccountStatus.ACTIVE.value,
            "leaves": DEFAULT_LEAVE_ALLOWANCE,
            "usedLeaves": 0,
            "photoUrl": AVATAR_URL_TEMPLATE.format(name=quote_plus(name)),
        }

    def _create(self, fields: Dict[str, Any]) -> Account:
        ticket = self._snapshot.issue()
        account = self._accounts.create(fields)
        self._snapshot.append(Collection.ACCOUNTS, ticket, account)
        return account

    def register(self, fields: Mapping[str, Any]) -> Account:
        """Self-service sign-up: always an employee on the default salary."""
        return self._create(self._new_account_fields(fields, role=Role.EMPLOYEE, salary=DEFAULT_SALARY))

    def add_account(self, fields: Mapping[str, Any]) -> Account:
        role = require_choice(fields.get("role") or Role.EMPLOYEE.value, Role, "Role")
        salary = parse_amount(fields.get("salary"), DEFAULT_SALARY)
        return self._create(self._new_account_fields(fields, role=role, salary=salary))

    def update_account(self, account_id: Any, fields: Mapping[str, Any]) -> Account:
        current = self._snapshot.find(Collection.ACCOUNTS, account_id)
        if current is None:
            raise NotFoundError(Collection.ACCOUNTS, account_id)

        changes: Dict[str, Any] = {}
        for name in _EDITABLE_TEXT_FIELDS:
            value = optional_text(fields.get(name))
            if value:
                changes[name] = value
        changes["salary"] = parse_amount(fields.get("salary"), current.salary)
        if fields.get("status"):
            changes["status"] = require_choice(fields.get("status"), AccountStatus, "Status").value

        ticket = self._snapshot.issue()
        saved = self._accounts.update(current.account_id, current.patched_record(changes))
        self._snapshot.replace(Collection.ACCOUNTS, ticket, saved)
        return saved
