from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import bootstrap_database
from .enrollments.controller import register as register_enrollments
from .rosters.controller import register as register_rosters
from .students.controller import register as register_students
from .subjects.controller import register as register_subjects

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the JSON API.

    Pass ``container`` to serve prebuilt services (tests, embedding); otherwise
    services are wired to MySQL from the selected settings module.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "Starting with settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        auto_init = bool(getattr(settings, "AUTO_INIT_DB", False))
        auto_seed = bool(getattr(settings, "AUTO_SEED_DB", False))
        if auto_init or auto_seed:
            tables = bootstrap_database(
                db_config,
                schema_path=DATABASE_DIR / "schema.sql" if auto_init else None,
                seed_path=DATABASE_DIR / "seed.sql" if auto_seed else None,
            )
            logger.info("Database ready (tables=%s)", ", ".join(tables))

        container = build_container(db_config=db_config)

    register_error_handlers(app)
    register_subjects(app, container)
    register_students(app, container)
    register_enrollments(app, container)
    register_rosters(app, container)
    register_attendance(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "service": "school-attendance"})

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=3570)
