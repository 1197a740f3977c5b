from __future__ import annotations

import importlib

import structlog
from dotenv import load_dotenv

from gym_erp.common.logging_setup import configure_logging
from gym_erp.config import get_settings_module
from gym_erp.database.bootstrap import SCHEMA_PATH, apply_schema, list_tables
from gym_erp.database.connection import DBConfig

logger = structlog.get_logger("scripts.init_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FORMAT", "console"))
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=SCHEMA_PATH)
    tables = list_tables(db_config)
    logger.info(
        "init_db.done",
        target=DBConfig.from_dict(db_config).describe(),
        tables=len(tables),
    )


if __name__ == "__main__":
    main()
