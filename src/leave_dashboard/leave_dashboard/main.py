from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_config import setup_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables, seed_holidays
from .holidays.calendar import DEFAULT_HOLIDAYS
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format_as_json=bool(getattr(settings, "LOG_JSON", True)),
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "Starting leave dashboard",
            extra={
                "settings": settings_module,
                "db": f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
            },
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready", extra={"tables": len(list_tables(db_config))})
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            seed_holidays(db_config, DEFAULT_HOLIDAYS)

        container = build_container(
            db_config=db_config,
            declarability_cache_seconds=getattr(settings, "DECLARABILITY_CACHE_SECONDS", 30 * 60),
            report_max_workers=int(getattr(settings, "REPORT_MAX_WORKERS", 1)),
        )

    app.extensions["container"] = container
    register_reports(app, container)

    return app
