"""Shared fixtures: an in-memory SQLite ledger with foreign keys enforced."""
from __future__ import annotations

from typing import Iterator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from ledger.db import create_schema, create_sync_engine, get_sessionmaker
from ledger.registry import SchemaRegistry, build_registry


@pytest.fixture()
def engine() -> Iterator[Engine]:
    engine = create_sync_engine("sqlite:///:memory:", echo=False)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine: Engine) -> Iterator[Session]:
    """Provide a fresh database session for each test."""

    SessionLocal = get_sessionmaker(engine=engine)
    with SessionLocal() as session:
        yield session


@pytest.fixture(scope="session")
def registry() -> SchemaRegistry:
    return build_registry()
