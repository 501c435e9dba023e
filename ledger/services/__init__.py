"""Service layer built on top of the ledger tables."""

from .integrity import IntegrityService

__all__ = ["IntegrityService"]
