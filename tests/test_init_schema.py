"""
Tests for the schema initialization script.
"""

from sqlalchemy import create_engine, inspect

from scripts.init_schema import init_schema

GUESTBOOK_TABLES = {"guests", "tables", "relationships", "photos", "photo_assignments"}


class TestInitSchema:
    """Tests for init_schema()."""

    def test_creates_sqlite_file_and_directory(self, tmp_path):
        db_file = tmp_path / "data" / "guestbook.db"
        engine = create_engine(f"sqlite:///{db_file}")

        result = init_schema(engine)

        assert db_file.exists()
        assert set(result) == GUESTBOOK_TABLES
        assert all(result.values())
        assert GUESTBOOK_TABLES <= set(inspect(engine).get_table_names())
        engine.dispose()

    def test_second_run_leaves_tables_alone(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'guestbook.db'}")
        init_schema(engine)

        result = init_schema(engine)

        assert not any(result.values())
        engine.dispose()
