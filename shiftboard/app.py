"""Application factory for the shift board."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from flask import Flask, jsonify, redirect, url_for
from flask.logging import default_handler
from flask.typing import ResponseReturnValue

from . import cli
from .adapters.config_loader import load_config
from .blueprints.board.routes import bp as board_bp
from .blueprints.reports.routes import bp as reports_bp
from .blueprints.resources.routes import bp as resources_bp
from .dao import db as db_module

CONFIG_ENV_VAR = "SHIFTBOARD_CONFIG"

DEFAULT_CONFIG: dict[str, Any] = {
    "SECRET_KEY": "dev",
    "DATABASE_TIMEOUT": 5.0,
    "AUTO_INIT_DB": True,
    "LOG_LEVEL": "INFO",
    "DEFAULT_WEEKLY_HOURS": 36,
}

BLUEPRINTS = (board_bp, resources_bp, reports_bp)


def create_app(config: dict[str, Any] | None = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(
        __name__,
        instance_relative_config=True,
        template_folder="templates",
    )
    app.config.from_mapping(DEFAULT_CONFIG)

    config_path = os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        app.config.update(load_config(config_path))
    if config:
        app.config.update(config)

    _configure_logging(str(app.config["LOG_LEVEL"]).upper())

    database_path = app.config.get(
        "DATABASE",
        Path(app.instance_path) / "shiftboard.sqlite",
    )
    if isinstance(database_path, Path):
        database_path = str(database_path)
    app.config["DATABASE"] = database_path

    Path(app.instance_path).mkdir(parents=True, exist_ok=True)

    db_module.init_app(app)
    app.cli.add_command(cli.export_xlsx_command)
    if app.config.get("AUTO_INIT_DB", True):
        db_module.ensure_schema(app)

    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)

    @app.errorhandler(db_module.FetchError)
    def handle_fetch_error(exc: db_module.FetchError) -> ResponseReturnValue:
        app.logger.exception("Store read failed: %s", exc)
        return jsonify({"error": "Could not load data from the store"}), 503

    @app.errorhandler(db_module.IntegrityViolation)
    def handle_integrity_error(exc: db_module.IntegrityViolation) -> ResponseReturnValue:
        app.logger.warning("Store rejected write: %s", exc)
        return jsonify({"error": f"Write rejected: {exc}"}), 409

    @app.errorhandler(db_module.WriteError)
    def handle_write_error(exc: db_module.WriteError) -> ResponseReturnValue:
        app.logger.exception("Store write failed: %s", exc)
        return jsonify({"error": "Could not save changes"}), 500

    @app.get("/")
    def index() -> ResponseReturnValue:
        return redirect(url_for("board.board_page"))

    @app.get("/healthz")
    def healthcheck() -> tuple[str, int]:
        return "OK", 200

    return app


def _configure_logging(level: str) -> None:
    package_logger = logging.getLogger(__package__)
    package_logger.setLevel(level)
    if default_handler not in package_logger.handlers:
        package_logger.addHandler(default_handler)
