"""
Database session management and configuration.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Any, Dict, Generator

from recipebox.config import settings


def _engine_options(database_url: str) -> Dict[str, Any]:
    """Build create_engine keyword arguments for the configured backend."""
    options: Dict[str, Any] = {"pool_pre_ping": settings.database_pool_pre_ping}
    if database_url.startswith("sqlite"):
        # SQLite pools do not take sizing arguments
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.database_pool_size
        options["max_overflow"] = settings.database_max_overflow
    return options


# Create database engine with configurable pool settings
engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for ORM models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.

    Usage in FastAPI:
        @app.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """Create all tables in the database."""
    # Models must be imported so they register on Base.metadata
    from recipebox.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_tables():
    """Drop all tables in the database. Use with caution!"""
    Base.metadata.drop_all(bind=engine)
