"""Create and drop the ledger tables."""
from __future__ import annotations

from sqlalchemy.engine import Engine

from ledger.core.log import get_logger, log_context, timeit
from ledger.models import Base

LOGGER = get_logger(__name__)


def table_names() -> list[str]:
    """Ledger tables in dependency order (parents first)."""

    return [table.name for table in Base.metadata.sorted_tables]


def create_schema(engine: Engine) -> list[str]:
    """Create any missing ledger tables and return the full table list."""

    names = table_names()
    with log_context.bound(job="create_schema"):
        with timeit("Schema creation", logger=LOGGER, unit="tables", total=len(names)):
            Base.metadata.create_all(engine)
    return names


def drop_schema(engine: Engine) -> list[str]:
    """Drop the ledger tables, children first."""

    names = list(reversed(table_names()))
    with log_context.bound(job="drop_schema"):
        with timeit("Schema drop", logger=LOGGER, unit="tables", total=len(names)):
            Base.metadata.drop_all(engine)
    return names
