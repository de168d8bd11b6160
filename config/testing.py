import os

from .config import CONFIG_DIR

SECRET_KEY = "test-secret"

STORE_CONFIG = {
    "base_url": os.getenv("STORE_URL", "http://localhost:3001"),
    "timeout": 2.0,
    "collection_paths": {},
}

SESSION_FILE = os.getenv("SESSION_FILE", str(CONFIG_DIR.parent / ".pytest_session.json"))
RELOAD_AFTER_MUTATION = False
LOGGING_CONFIG = None

DEBUG = False
TESTING = True
