from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .model import Account


class AccountRepository(Protocol):
    """Repository interface for Account.

    Note (DIP): the service layer depends on this interface, not on the HTTP store.
    """

    def list_all(self) -> Sequence[Account]:
        raise NotImplementedError

    def create(self, fields: Mapping[str, Any]) -> Account:
        raise NotImplementedError

    def update(self, account_id: Any, record: Mapping[str, Any]) -> Account:
        """Full-record replace."""

        raise NotImplementedError

    def delete_by_id(self, account_id: Any) -> None:
        raise NotImplementedError
