"""
Database connection and session management.
Uses synchronous SQLAlchemy for simplicity (single-couple app).
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.config import get_settings

# Create engine (synchronous)
settings = get_settings()
engine = create_engine(
    settings.database_url,
    echo=settings.debug,  # Log SQL when DEBUG=true
    pool_pre_ping=True,  # Verify connections before use
    connect_args={"check_same_thread": False} if settings.is_sqlite else {},
)

# Session factory
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency that provides a database session.

    Usage in FastAPI:
        @app.get("/guests")
        def list_guests(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
