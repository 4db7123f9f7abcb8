"""Create the schema and optionally load the demo data.

    python scripts/init_db.py            # schema only
    python scripts/init_db.py --seed     # schema + demo subjects/students/enrollments
    python scripts/init_db.py --seed-only
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.database.bootstrap import bootstrap_database

DATABASE_DIR = REPO_ROOT / "database"


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--seed", action="store_true", help="also apply database/seed.sql")
    group.add_argument("--seed-only", action="store_true", help="apply database/seed.sql to an existing schema")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    tables = bootstrap_database(
        db_config,
        schema_path=None if args.seed_only else DATABASE_DIR / "schema.sql",
        seed_path=DATABASE_DIR / "seed.sql" if (args.seed or args.seed_only) else None,
    )
    print(
        f"OK: {db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(tables)}: {', '.join(tables)})"
    )


if __name__ == "__main__":
    main()
