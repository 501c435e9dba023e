"""Opinionated SQLAlchemy session helpers."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .engine import create_sync_engine


def get_sessionmaker(
    url: str | None = None, *, engine: Engine | None = None, **kwargs
) -> sessionmaker[Session]:
    """Return a ``sessionmaker`` bound to ``engine`` or a freshly configured one."""

    bind = engine if engine is not None else create_sync_engine(url, **kwargs)
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


@contextmanager
def session_scope(
    url: str | None = None, *, engine: Engine | None = None, **kwargs
) -> Iterator[Session]:
    """Provide a transactional scope for imperative scripts."""

    Session_ = get_sessionmaker(url, engine=engine, **kwargs)
    session = Session_()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
