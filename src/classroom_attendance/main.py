from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .common.web import register_error_handlers
from .container import build_container, build_store
from .core.logging_config import configure_logging
from .database.bootstrap import apply_schema, list_tables
from .settings import get_settings_module
from .store.base import DocumentStore
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(*, store: DocumentStore | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    backend = str(getattr(settings, "STORE_BACKEND", "mysql"))
    db_config = getattr(settings, "DB_CONFIG", None)
    if store is None:
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready", extra={"tables": len(list_tables(db_config))})
        store = build_store(backend=backend, db_config=db_config)

    logger.info("app starting", extra={"settings": settings_module, "store": type(store).__name__})

    container = build_container(
        store=store,
        recent_limit=int(getattr(settings, "RECENT_ACTIVITY_LIMIT", 5)),
    )
    app.extensions["container"] = container

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_error_handlers(app)
    register_users(app, container)
    register_classes(app, container)
    register_attendance(app, container)

    return app
