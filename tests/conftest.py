"""
Pytest configuration and fixtures for the wedding guestbook tests.
"""

import os

# Point the app at an in-memory database before anything imports app.database
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base, Guest, GuestRelationship, RelationshipKind, RsvpStatus, SeatingTable


# Configure pytest-asyncio to use auto mode for async tests
pytest_plugins = ('pytest_asyncio',)


@pytest.fixture(scope="function")
def engine():
    """Create a fresh in-memory database engine with the full schema."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Session:
    """Provide a database session for tests.

    Each test runs in its own transaction that is rolled back after the test,
    ensuring test isolation.
    """
    connection = engine.connect()
    transaction = connection.begin()

    # Create a session bound to the connection
    session_factory = sessionmaker(bind=connection)
    session = session_factory()

    yield session

    # Cleanup: rollback transaction and close
    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def test_client(db_session):
    """Create test client with database session override."""
    from app.database import get_db
    from app.main import app

    def override_get_db():
        # Fixture objects may hold collections loaded before the request
        db_session.expire_all()
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_guest(db_session):
    """Factory for guests; flushes so the id is available."""

    def _make_guest(first_name, last_name="Guest", table=None, rsvp_status=RsvpStatus.ACCEPTED, **kwargs):
        guest = Guest(
            first_name=first_name,
            last_name=last_name,
            rsvp_status=rsvp_status,
            table_id=table.id if table is not None else None,
            **kwargs,
        )
        db_session.add(guest)
        db_session.flush()
        return guest

    return _make_guest


@pytest.fixture
def make_table(db_session):
    """Factory for tables."""

    def _make_table(name, capacity=8, **kwargs):
        table = SeatingTable(name=name, capacity=capacity, **kwargs)
        db_session.add(table)
        db_session.flush()
        return table

    return _make_table


@pytest.fixture
def make_relationship(db_session):
    """Factory for relationships."""

    def _make_relationship(guest_from, guest_to, strength=1, relationship_type=RelationshipKind.FRIEND, **kwargs):
        relationship = GuestRelationship(
            guest_from_id=guest_from.id,
            guest_to_id=guest_to.id,
            relationship_type=relationship_type,
            strength=strength,
            **kwargs,
        )
        db_session.add(relationship)
        db_session.flush()
        return relationship

    return _make_relationship
