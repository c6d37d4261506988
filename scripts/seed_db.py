"""Load the public holiday calendar from database/seed.sql (safe to re-run)."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.time_entry_engine.time_entry_engine.database.bootstrap import apply_seed_sql
from src.time_entry_engine.time_entry_engine.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(settings.DB_CONFIG))

    count = apply_seed_sql(conn, seed_path=REPO_ROOT / "database" / "seed.sql")
    print(f"OK: holidays seeded -> {conn.config.describe()} (statements={count})")


if __name__ == "__main__":
    main()
