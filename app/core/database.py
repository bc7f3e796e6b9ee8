"""
Database setup for the business records service.

- Engine and session factory are built from settings.database_url.
- SQLite connections get foreign key enforcement so cascades behave
  the same way they do on PostgreSQL.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from app.core.config import settings


def build_engine(database_url: str) -> Engine:
    """Create an engine, enabling foreign keys when the backend is SQLite."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # FastAPI runs sync routes in a thread pool
        connect_args["check_same_thread"] = False

    new_engine = create_engine(database_url, connect_args=connect_args)

    if database_url.startswith("sqlite"):
        @event.listens_for(new_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = build_engine(settings.database_url)

# Standard session factory used via dependency injection (see app/core/dependencies.py:get_db)
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Declarative base class for ORM models
Base = declarative_base()
