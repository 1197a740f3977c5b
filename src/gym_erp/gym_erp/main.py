from __future__ import annotations

import importlib
from typing import Optional

import structlog
from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .billing.controller import register as register_billing
from .common.datetime_utils import parse_hhmm
from .common.errors import register_error_handlers
from .common.logging_setup import configure_logging
from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .reports.controller import register as register_reports
from .sessions.controller import register as register_sessions

logger = structlog.get_logger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FORMAT", "console"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "app.starting",
            settings=settings_module,
            db=DBConfig.from_dict(db_config).describe(),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("app.schema_ready", tables=len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            default_staff_in_time=parse_hhmm(getattr(settings, "DEFAULT_STAFF_IN_TIME", "09:00")),
            reminder_window_days=int(getattr(settings, "REMINDER_WINDOW_DAYS", 14)),
        )

    app.extensions["gym_erp"] = container

    register_error_handlers(app)
    register_attendance(app, container)
    register_sessions(app, container)
    register_billing(app, container)
    register_reports(app, container)

    return app
