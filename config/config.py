import os
from pathlib import Path

CONFIG_DIR = Path(__file__).resolve().parent


def _collection_paths() -> dict:
    # e.g. STORE_PATH_ACCOUNTS=users for a json-server db.json from the old dashboard
    paths = {}
    for name in ("accounts", "attendance", "leaves", "payroll", "departments"):
        value = os.environ.get(f"STORE_PATH_{name.upper()}")
        if value:
            paths[name] = value
    return paths


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "hr-portal-dev-secret"

    STORE_URL = os.environ.get("STORE_URL", "http://localhost:3001")
    STORE_TIMEOUT = float(os.environ.get("STORE_TIMEOUT", "10"))

    SESSION_FILE = os.environ.get("SESSION_FILE", str(Path.home() / ".hr_portal" / "session.json"))
    RELOAD_AFTER_MUTATION = bool(int(os.environ.get("RELOAD_AFTER_MUTATION", "0")))
    LOGGING_CONFIG = os.environ.get("LOGGING_CONFIG", str(CONFIG_DIR / "logging.yaml"))


SECRET_KEY = Config.SECRET_KEY
STORE_CONFIG = {
    "base_url": Config.STORE_URL,
    "timeout": Config.STORE_TIMEOUT,
    "collection_paths": _collection_paths(),
}
SESSION_FILE = Config.SESSION_FILE
RELOAD_AFTER_MUTATION = Config.RELOAD_AFTER_MUTATION
LOGGING_CONFIG = Config.LOGGING_CONFIG

DEBUG = bool(int(os.environ.get("DEBUG", "1")))
