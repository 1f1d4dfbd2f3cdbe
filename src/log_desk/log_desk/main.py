from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig, DatabaseConnection
from .timelogs.controller import register as register_timelogs


def create_app(settings=None, **container_overrides) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = settings or importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s - %(levelname)s - [%(name)s] %(message)s",
    )

    backend = str(getattr(settings, "STORAGE_BACKEND", "file")).lower()
    # Helpful startup info so it is obvious where the logs are persisted.
    if app.config["DEBUG"]:
        print("[log-desk] settings=", settings_module, " storage=", backend)

    if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(conn, schema_path=schema_path)
        if app.config["DEBUG"]:
            print(f"[log-desk] schema ready (tables={len(list_tables(conn))})")

    container = build_container(settings=settings, **container_overrides)
    app.extensions["log_desk"] = container

    register_timelogs(app, container)

    return app
