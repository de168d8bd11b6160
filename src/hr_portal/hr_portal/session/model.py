from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import Role, SessionOrigin
from ..users.model import Account


@dataclass(frozen=True)
class Session:
    """An authenticated session.

    Created by login or by bootstrapping from the persisted snapshot and
    discarded on logout. ``account`` is the copy taken at that moment and is
    not refreshed until the next login.
    """

    account: Account
    started_at: datetime
    origin: SessionOrigin

    @property
    def account_id(self):
        return self.account.account_id

    @property
    def role(self) -> Role:
        return self.account.role

    @property
    def is_admin(self) -> bool:
        return self.account.is_admin
