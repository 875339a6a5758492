"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import os

from flask import Flask

from ..extensions import db
from .error_handlers import register_error_handlers
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure the application logger.

    ``app.logger`` and every ``logging.getLogger(__name__)`` inside the
    package share the ``wordstack_app`` logger tree, so one setup covers both.
    """

    logger = setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
    )
    logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)
    register_error_handlers(app)


def initialize_database(app: Flask) -> None:
    """Create the database tables used by the storage collaborator."""

    from .. import models  # noqa: F401  (registers tables on db.metadata)

    uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    if uri.startswith("sqlite:///") and not uri.endswith(":memory:"):
        db_dir = os.path.dirname(uri[len("sqlite:///"):])
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    db.create_all()
    app.logger.info("Database tables ensured at %s", uri)


def initialize_practice_registry(app: Flask) -> None:
    """Attach the per-learner session registry to the app."""

    from ..modules.practice.config import PracticeModuleDefaultConfig
    from ..modules.practice.services.session_registry import SessionRegistry

    app.extensions["wordstack_sessions"] = SessionRegistry(
        corpus_path=app.config.get("WORDSTACK_CORPUS_PATH"),
        storage_key=app.config.get("MASTERY_STORAGE_KEY", "excludedWords"),
        max_sessions=app.config.get(
            "PRACTICE_MAX_SESSIONS", PracticeModuleDefaultConfig.PRACTICE_MAX_SESSIONS
        ),
    )
