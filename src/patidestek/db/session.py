"""Database session configuration."""

from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from patidestek.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


def utcnow() -> datetime:
    """Timezone-aware UTC now, used for column defaults."""
    return datetime.now(UTC)


def _engine_options(url: str) -> dict[str, Any]:
    options: dict[str, Any] = {"pool_pre_ping": True, "echo": settings.sql_debug}
    if url.startswith("sqlite"):
        # FastAPI runs sync dependencies in a threadpool.
        options["connect_args"] = {"check_same_thread": False}
    return options


# Ensure model modules are imported so that metadata is populated when create_all runs.
import patidestek.models  # noqa: E402,F401

engine = create_engine(settings.database_url_sync, **_engine_options(settings.database_url_sync))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """Drop all database tables."""
    Base.metadata.drop_all(bind=engine)
