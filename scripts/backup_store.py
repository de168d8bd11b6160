"""Backup the remote store.

Writes every collection into one timestamped JSON file under ``backups/``.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_portal.hr_portal.core.enums import Collection
from src.hr_portal.hr_portal.store.client import RemoteStoreClient
from src.hr_portal.hr_portal.store.connection import StoreConfig, StoreConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    client = RemoteStoreClient(StoreConnection(StoreConfig.from_mapping(settings.STORE_CONFIG)))

    # Fetch everything first so a failure leaves no half-written file.
    dump = {c.value: client.list_all(c) for c in Collection}

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"hr_store_{ts}.json"
    out_file.write_text(json.dumps(dump, ensure_ascii=False, indent=2), encoding="utf-8")

    counts = ", ".join(f"{name}={len(rows)}" for name, rows in dump.items())
    print(f"OK: Backup saved -> {out_file} ({counts})")


if __name__ == "__main__":
    main()
