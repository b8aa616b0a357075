"""
Wedding Guestbook - FastAPI Application Entry Point
"""

import logging

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db, engine
from app.models import Base, Guest, GuestRelationship, Photo, SeatingTable
from app.routers import guests, relationships, tables, photos, graph

# Initialize FastAPI app
settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Wedding Guestbook",
    description="Guest list, relationships, seating and photos for a wedding",
    version="0.1.0",
    debug=settings.debug,
)

# Front end runs on its own dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include routers
app.include_router(guests.router)
app.include_router(relationships.router)
app.include_router(tables.router)
app.include_router(photos.router)
app.include_router(graph.router)


@app.on_event("startup")
async def startup_event():
    """Create missing tables when AUTO_CREATE_SCHEMA is set."""
    if settings.auto_create_schema:
        Base.metadata.create_all(bind=engine)
        logger.info("Database schema ensured")


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint that also verifies database connection.
    """
    try:
        # Test database connection
        result = db.execute(text("SELECT 1"))
        result.fetchone()
        db_status = "connected"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = f"error: {str(e)}"

    return {
        "status": "healthy",
        "database": db_status,
        "debug": settings.debug,
    }


@app.get("/api/stats")
def get_stats(db: Session = Depends(get_db)):
    """
    Get database statistics.
    Verifies database connection by querying actual data.
    """
    models = {
        "guests": Guest,
        "tables": SeatingTable,
        "relationships": GuestRelationship,
        "photos": Photo,
    }
    return {name: db.query(model).count() for name, model in models.items()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=settings.debug)
