"""Database housekeeping for the gym service.

Usage:
    python scripts/manage_db.py init     # create the database and apply database/schema.sql
    python scripts/manage_db.py seed     # apply database/seed.sql and the demo accounts
    python scripts/manage_db.py setup    # init + seed
    python scripts/manage_db.py tables   # list tables in the configured database
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.gym_attendance.gym_attendance.database.bootstrap import (
    apply_schema,
    apply_seed_sql,
    ensure_demo_users,
    list_tables,
)

DATABASE_DIR = REPO_ROOT / "database"


def _target(db_config: dict) -> str:
    return f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"


def init(db_config: dict) -> None:
    apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
    print(f"OK: schema applied to {_target(db_config)} (tables={len(list_tables(db_config))})")


def seed(db_config: dict) -> None:
    apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
    ensure_demo_users(db_config)
    print(f"OK: settings and demo accounts (admin/trainer/member) seeded into {_target(db_config)}")


def tables(db_config: dict) -> None:
    for name in list_tables(db_config):
        print(name)


COMMANDS = {
    "init": (init,),
    "seed": (seed,),
    "setup": (init, seed),
    "tables": (tables,),
}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Manage the gym attendance database.")
    parser.add_argument("command", choices=sorted(COMMANDS))
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    for step in COMMANDS[args.command]:
        step(db_config)


if __name__ == "__main__":
    main()
