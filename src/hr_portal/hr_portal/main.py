from __future__ import annotations

import importlib
import logging
from logging.config import dictConfig
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.web import register_error_handlers
from .container import Container, build_container
from .dashboard.controller import register as register_dashboard
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(logging_config: Optional[str]) -> None:
    if not logging_config:
        return
    path = Path(logging_config)
    if not path.exists():
        logger.warning("Logging config %s not found, using defaults", path)
        return
    with path.open(encoding="utf-8") as fh:
        dictConfig(yaml.safe_load(fh))


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    configure_logging(getattr(settings, "LOGGING_CONFIG", None))

    store_config = getattr(settings, "STORE_CONFIG")
    logger.info("settings=%s store=%s", settings_module, store_config.get("base_url"))

    if container is None:
        container = build_container(
            store_config=store_config,
            session_file=getattr(settings, "SESSION_FILE"),
            reload_after_mutation=bool(getattr(settings, "RELOAD_AFTER_MUTATION", False)),
        )
        container.session_manager.bootstrap_session()

    register_users(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_payroll(app, container)
    register_dashboard(app, container)
    register_error_handlers(app)

    app.extensions["hr_portal"] = container
    return app
