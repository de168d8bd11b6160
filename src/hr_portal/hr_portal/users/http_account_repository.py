from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.enums import Collection
from ..store.repository import RecordStore, map_record, map_records
from .model import Account
from .repository import AccountRepository


class HttpAccountRepository(AccountRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Account]:
        return map_records(Collection.ACCOUNTS, self._store.list_all(Collection.ACCOUNTS), Account.from_record)

    def create(self, fields: Mapping[str, Any]) -> Account:
        return map_record(Collection.ACCOUNTS, self._store.create(Collection.ACCOUNTS, fields), Account.from_record)

    def update(self, account_id: Any, record: Mapping[str, Any]) -> Account:
        row = self._store.update_by_id(Collection.ACCOUNTS, account_id, record)
        return map_record(Collection.ACCOUNTS, row, Account.from_record)

    def delete_by_id(self, account_id: Any) -> None:
        self._store.delete_by_id(Collection.ACCOUNTS, account_id)
