"""Seed the remote store with demo departments and accounts.

Accounts are matched by username and updated in place, so the script can be
re-run safely.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_portal.hr_portal.common.passwords import hash_password
from src.hr_portal.hr_portal.core.constants import AVATAR_URL_TEMPLATE, DEFAULT_LEAVE_ALLOWANCE
from src.hr_portal.hr_portal.core.enums import Collection
from src.hr_portal.hr_portal.store.client import RemoteStoreClient
from src.hr_portal.hr_portal.store.connection import StoreConfig, StoreConnection

DEMO_DEPARTMENTS = [
    {"name": "Engineering", "employeeCount": 1},
    {"name": "Human Resources", "employeeCount": 1},
]

DEMO_ACCOUNTS = [
    {
        "username": "admin",
        "password": "admin123",
        "role": "admin",
        "name": "Admin Demo",
        "email": "admin@example.com",
        "department": "Human Resources",
        "position": "HR Manager",
        "salary": 80000,
    },
    {
        "username": "employee",
        "password": "employee123",
        "role": "employee",
        "name": "Jane Employee",
        "email": "jane@example.com",
        "department": "Engineering",
        "position": "Developer",
        "salary": 50000,
    },
]


def upsert_account(client: RemoteStoreClient, existing: dict, demo: dict) -> None:
    record = {
        "phone": "",
        "joinDate": "2025-01-01",
        "status": "active",
        "leaves": DEFAULT_LEAVE_ALLOWANCE,
        "usedLeaves": 0,
        "photoUrl": AVATAR_URL_TEMPLATE.format(name=demo["name"].replace(" ", "+")),
        **demo,
        "password": hash_password(demo["password"]),
    }
    current = existing.get(demo["username"])
    if current:
        client.update_by_id(Collection.ACCOUNTS, current["id"], {**current, **record, "id": current["id"]})
    else:
        client.create(Collection.ACCOUNTS, record)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    client = RemoteStoreClient(StoreConnection(StoreConfig.from_mapping(settings.STORE_CONFIG)))

    departments = {d.get("name") for d in client.list_all(Collection.DEPARTMENTS)}
    for dept in DEMO_DEPARTMENTS:
        if dept["name"] not in departments:
            client.create(Collection.DEPARTMENTS, dept)

    existing = {a.get("username"): a for a in client.list_all(Collection.ACCOUNTS)}
    for demo in DEMO_ACCOUNTS:
        upsert_account(client, existing, demo)

    print(f"OK: Seeded store -> {settings.STORE_CONFIG['base_url']}")


if __name__ == "__main__":
    main()
