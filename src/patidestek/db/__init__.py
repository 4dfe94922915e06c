"""Engine, session factory and declarative base."""

from .integrity import commit_or_conflict
from .session import Base, SessionLocal, create_tables, drop_tables, get_db

__all__ = [
    "Base",
    "SessionLocal",
    "commit_or_conflict",
    "create_tables",
    "drop_tables",
    "get_db",
]
