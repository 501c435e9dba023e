"""Database helpers and SQLAlchemy session factories."""

from .bootstrap import create_schema, drop_schema, table_names
from .engine import create_sync_engine
from .session import get_sessionmaker, session_scope

__all__ = [
    "create_schema",
    "create_sync_engine",
    "drop_schema",
    "get_sessionmaker",
    "session_scope",
    "table_names",
]
