from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_COVERAGE_DISPLAY_LIMIT, DEFAULT_REPORT_DISPLAY_LIMIT
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .enablement.controller import register as register_documentation

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["REPORT_DISPLAY_LIMIT"] = int(getattr(settings, "REPORT_DISPLAY_LIMIT", DEFAULT_REPORT_DISPLAY_LIMIT))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s db=%s", settings_module, DBConfig.from_settings(db_config).label)

    database_dir = Path(__file__).resolve().parents[3] / "database"
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=database_dir / "schema.sql")
        logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=database_dir / "seed.sql")
        logger.info("demo seed ready")

    container = build_container(
        db_config=db_config,
        health_policy=getattr(settings, "HEALTH_POLICY", None),
        coverage_limit=int(getattr(settings, "COVERAGE_DISPLAY_LIMIT", DEFAULT_COVERAGE_DISPLAY_LIMIT)),
        optimistic_locking=bool(getattr(settings, "REMEDIATION_OPTIMISTIC_LOCKING", False)),
    )

    register_documentation(app, container)

    return app
