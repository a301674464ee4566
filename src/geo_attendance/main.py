from __future__ import annotations

import importlib
import logging
from pathlib import Path
from datetime import datetime
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask
from flask_socketio import SocketIO

from .attendance.controller import register as register_attendance
from .attendance.repository import AttendanceRepository
from .common.datetime_utils import now_local
from .config import get_settings_module
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .realtime.controller import register as register_realtime

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def create_app(
    *,
    attendance_repo: Optional[AttendanceRepository] = None,
    clock: Callable[[], datetime] = now_local,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["HOST"] = getattr(settings, "HOST", "0.0.0.0")
    app.config["PORT"] = int(getattr(settings, "PORT", 3000))

    configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")).upper())
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    socketio = SocketIO(app, cors_allowed_origins=getattr(settings, "CORS_ORIGIN", "*"))

    container = build_container(
        db_config=db_config,
        attendance_repo=attendance_repo,
        clock=clock,
        disconnect=lambda sid: socketio.server.disconnect(sid, namespace="/"),
        emit=socketio.emit,
    )

    if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    register_attendance(app, container)
    register_realtime(socketio, container)

    app.extensions["geo_attendance"] = container
    return app


def run() -> None:
    app = create_app()
    socketio: SocketIO = app.extensions["socketio"]
    logger.info("Server is up and running on port %s", app.config["PORT"])
    socketio.run(
        app,
        host=app.config["HOST"],
        port=app.config["PORT"],
        debug=app.config["DEBUG"],
        allow_unsafe_werkzeug=app.config["DEBUG"],
    )


if __name__ == "__main__":
    run()
