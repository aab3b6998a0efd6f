from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_GYM_CAPACITY
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .members.controller import register as register_members
from .settings.controller import register as register_settings
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_GYM_CAPACITY"] = int(getattr(settings, "DEFAULT_GYM_CAPACITY", DEFAULT_GYM_CAPACITY))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        if app.config["DEBUG"]:
            logger.debug(
                "settings=%s db=%s@%s:%s/%s",
                settings_module,
                db_config.get("user"),
                db_config.get("host"),
                db_config.get("port", 3306),
                db_config.get("database"),
            )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            ensure_demo_users(db_config)
            logger.info("Demo seed ready")

        container = build_container(db_config=db_config, default_capacity=app.config["DEFAULT_GYM_CAPACITY"])

    register_error_handlers(app)
    register_users(app, container)
    register_members(app, container)
    register_attendance(app, container)
    register_settings(app, container)

    return app
