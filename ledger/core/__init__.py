"""Core utilities shared across the ledger package."""

from .config import DatabaseSettings, Settings, get_settings  # noqa: F401
from .log import get_logger, init_logging, log_context, timeit  # noqa: F401

__all__ = [
    "DatabaseSettings",
    "Settings",
    "get_settings",
    "get_logger",
    "init_logging",
    "log_context",
    "timeit",
]
