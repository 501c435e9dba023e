"""Base declarative class for the ledger tables."""
from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase

# Opaque text identifiers; bounded so MySQL can index them.
ID_TYPE = String(64)
NAME_TYPE = String(255)


class Base(DeclarativeBase):
    """Declarative base shared by all ledger models."""

    pass
