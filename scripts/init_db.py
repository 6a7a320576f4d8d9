from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module
from control_horari.common.logging import setup_logging
from control_horari.database.bootstrap import apply_schema
from control_horari.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = DBConfig.from_dict(settings.DB_CONFIG)

    schema_path = Path(__file__).resolve().parents[1] / "database" / "schema.sql"
    apply_schema(DatabaseConnection(db_config), database=db_config.database, schema_path=schema_path)
    print(f"OK: Applied schema.sql -> {db_config.user}@{db_config.host}:{db_config.port}/{db_config.database}")


if __name__ == "__main__":
    main()
