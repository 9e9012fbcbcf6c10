from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .container import build_container
from .reports.controller import register as register_reports
from .roster.controller import register as register_roster
from .settings import get_settings_module
from .staff.controller import register as register_staff


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["SECRET_KEY"] = getattr(settings, "SECRET_KEY")
    app.config["DATA_DIR"] = getattr(settings, "DATA_DIR")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["LOG_LEVEL"] = getattr(settings, "LOG_LEVEL", "INFO")
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.info("settings=%s data_dir=%s", settings_module, app.config["DATA_DIR"])

    container = build_container(data_dir=app.config["DATA_DIR"])
    app.extensions["rollbook"] = container

    register_staff(app, container)
    register_roster(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
