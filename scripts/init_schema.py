#!/usr/bin/env python3
"""
Create the guestbook tables in the configured database.

Uses DATABASE_URL_OVERRIDE when set (e.g. sqlite:///./data/guestbook.db),
otherwise the DB_* PostgreSQL settings. Existing tables are left alone,
so it is safe to run again.

Usage:
    python scripts/init_schema.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
from sqlalchemy import Engine, inspect
from sqlalchemy.exc import SQLAlchemyError

from app.models import Base

# Load environment variables
load_dotenv()


def init_schema(engine: Engine) -> dict[str, bool]:
    """
    Create any missing guestbook tables.

    Returns:
        Table name -> True when this call created it, False when it already existed
    """
    # SQLite will not create missing parent directories for a file database
    database = engine.url.database
    if engine.url.get_backend_name() == "sqlite" and database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)

    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    return {table.name: table.name not in existing for table in Base.metadata.sorted_tables}


def main() -> int:
    from app.database import engine

    print(f"Database: {engine.url.render_as_string(hide_password=True)}")
    try:
        tables = init_schema(engine)
    except SQLAlchemyError as e:
        print(f"ERROR: could not create schema: {e}")
        return 1

    for name, created in tables.items():
        print(f"  {name:<20} {'created' if created else 'exists'}")
    print(f"{sum(tables.values())} tables created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
