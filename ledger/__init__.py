"""Household ledger: tables, foreign-key rules and insert validators."""

from .core import get_logger, get_settings
from .registry import DeleteAction, ForeignKeyRule, SchemaRegistry, build_registry

__all__ = [
    "DeleteAction",
    "ForeignKeyRule",
    "SchemaRegistry",
    "build_registry",
    "get_logger",
    "get_settings",
]
