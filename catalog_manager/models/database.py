"""Database setup and session management."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from catalog_manager.config import settings


def build_engine(database_url: str) -> Engine:
    """Create an engine with SQLite-specific settings."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def create_tables(bind: Engine | None = None):
    """Create all database tables."""
    # Import models to ensure they're registered with Base
    from catalog_manager.models import storage_entry  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
