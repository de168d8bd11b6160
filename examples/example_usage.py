"""Example: drive the session layer directly (without Flask).

Controllers are only a thin layer; the session manager and services hold the logic.
"""

import importlib

from config import get_settings_module

from src.hr_portal.hr_portal.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(store_config=settings.STORE_CONFIG, session_file=settings.SESSION_FILE)
    manager = container.session_manager

    session = manager.bootstrap_session()
    if session is None:
        manager.login("admin", "admin123")

    print(manager.compute_statistics())
    print(container.attendance_service.get_history_ui()[:5])


if __name__ == "__main__":
    main()
