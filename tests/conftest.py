from __future__ import annotations

import copy
from datetime import datetime
from typing import Any, Dict, List, Optional

import pytest

from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.core.enums import Collection
from src.hr_portal.hr_portal.core.exceptions import NotFoundError, TransportError


class FakeStore:
    """In-memory stand-in for the remote store, with failure injection.

    Add ``("list", Collection.X)``, ``("create", Collection.X)`` or
    ``("delete", Collection.X, record_id)`` style keys to ``fail``.
    """

    def __init__(self, data: Optional[Dict[Collection, List[dict]]] = None):
        data = data or {}
        self.data: Dict[Collection, List[dict]] = {c: copy.deepcopy(data.get(c, [])) for c in Collection}
        ids = [r["id"] for rows in self.data.values() for r in rows if isinstance(r.get("id"), int)]
        self._next_id = max(ids + [99]) + 1
        self.fail: set = set()
        self.calls: List[tuple] = []

    def _check(self, op: str, collection: Collection, record_id: Any = None) -> None:
        self.calls.append((op, collection, record_id))
        if (op, collection) in self.fail or (op, collection, record_id) in self.fail:
            raise TransportError(f"{op} {collection.value} unavailable")

    def _index(self, collection: Collection, record_id: Any) -> int:
        for i, r in enumerate(self.data[collection]):
            if r.get("id") == record_id:
                return i
        raise NotFoundError(collection, record_id)

    def list_all(self, collection):
        self._check("list", collection)
        return copy.deepcopy(self.data[collection])

    def create(self, collection, fields):
        self._check("create", collection)
        record = {**dict(fields), "id": self._next_id}
        self._next_id += 1
        self.data[collection].append(record)
        return copy.deepcopy(record)

    def update_by_id(self, collection, record_id, record):
        self._check("update", collection, record_id)
        i = self._index(collection, record_id)
        self.data[collection][i] = {**dict(record), "id": record_id}
        return copy.deepcopy(self.data[collection][i])

    def delete_by_id(self, collection, record_id):
        self._check("delete", collection, record_id)
        i = self._index(collection, record_id)
        del self.data[collection][i]

    def count(self, op: str, collection: Collection) -> int:
        return sum(1 for c in self.calls if c[0] == op and c[1] == collection)


class MemoryStorage:
    def __init__(self, record: Optional[dict] = None):
        self.record = copy.deepcopy(record)

    def read(self):
        return copy.deepcopy(self.record)

    def write(self, record):
        self.record = copy.deepcopy(record)

    def clear(self):
        self.record = None


ADMIN = {
    "id": 1,
    "username": "admin",
    "password": "admin123",
    "role": "admin",
    "name": "Admin User",
    "email": "admin@example.com",
    "phone": "",
    "department": "HR",
    "position": "Manager",
    "joinDate": "2024-01-01",
    "salary": 90000,
    "status": "active",
    "leaves": 12,
    "usedLeaves": 0,
    "photoUrl": "",
}

EMPLOYEE = {
    **ADMIN,
    "id": 2,
    "username": "jane",
    "password": "jane123",
    "role": "employee",
    "name": "Jane Doe",
    "department": "Engineering",
    "position": "Developer",
    "salary": 50000,
    "usedLeaves": 3,
}


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 8, 30, 9, 5, 0)


@pytest.fixture
def seed_data():
    return {
        Collection.ACCOUNTS: [ADMIN, EMPLOYEE],
        Collection.ATTENDANCE: [
            {"id": 20, "userId": 2, "date": "2025-08-29", "status": "present", "checkIn": "09:00", "checkOut": "17:30"},
        ],
        Collection.LEAVES: [
            {
                "id": 30,
                "userId": 2,
                "type": "Sick Leave",
                "from": "2025-09-01",
                "to": "2025-09-02",
                "reason": "Flu",
                "status": "pending",
                "appliedDate": "2025-08-28",
            },
        ],
        Collection.PAYROLL: [
            {
                "id": 40,
                "userId": 2,
                "month": "2025-07",
                "basicSalary": 50000,
                "bonus": 2000,
                "deductions": 500,
                "netPay": 51500,
                "status": "paid",
                "payDate": "2025-07-31",
            },
        ],
        Collection.DEPARTMENTS: [
            {"id": 50, "name": "Engineering", "employeeCount": 1},
            {"id": 51, "name": "HR", "employeeCount": 1},
        ],
    }


@pytest.fixture
def store(seed_data) -> FakeStore:
    return FakeStore(seed_data)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def make_container(fixed_now):
    def _make(store, storage=None, *, now=None, reload_after_mutation=False):
        moment = now or fixed_now
        return build_container(
            store_config={"base_url": "http://store.test"},
            session_file="unused.json",
            reload_after_mutation=reload_after_mutation,
            store=store,
            storage=storage if storage is not None else MemoryStorage(),
            clock=lambda: moment,
        )

    return _make


@pytest.fixture
def container(make_container, store, storage):
    c = make_container(store, storage)
    c.session_manager.bootstrap_session()
    return c


@pytest.fixture
def make_store():
    return FakeStore
