from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from geo_attendance.config import get_settings_module
from geo_attendance.database.bootstrap import apply_schema, list_tables
from geo_attendance.database.connection import DBConfig, DatabaseConnection
from geo_attendance.main import SCHEMA_PATH, configure_logging

logger = logging.getLogger("init_db")


def main() -> None:
    load_dotenv(override=False)
    configure_logging("INFO")
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    apply_schema(conn, schema_path=SCHEMA_PATH)
    tables = list_tables(conn)
    cfg = conn.config
    logger.info(
        "OK: Applied schema.sql -> %s@%s:%s/%s (tables=%d)",
        cfg.user, cfg.host, cfg.port, cfg.database, len(tables),
    )


if __name__ == "__main__":
    main()
