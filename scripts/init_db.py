#!/usr/bin/env python3
"""Create (or recreate) the ledger tables and optionally audit the data."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ledger.core.config import get_settings  # noqa: E402
from ledger.core.log import get_logger, init_logging, log_context  # noqa: E402
from ledger.db import create_schema, create_sync_engine, drop_schema, session_scope  # noqa: E402
from ledger.services import IntegrityService  # noqa: E402

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--url", type=str, default=None, help="SQLAlchemy URL (defaults to DATABASE_URL / DB_* settings)")
    parser.add_argument("--drop", action="store_true", help="Drop existing ledger tables first")
    parser.add_argument("--audit", action="store_true", help="Run the integrity audit afterwards")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    engine = create_sync_engine(args.url)
    log_context.bind(target=engine.url.render_as_string(hide_password=True))

    if args.drop:
        dropped = drop_schema(engine)
        logger.info("Dropped %s tables", len(dropped))
    created = create_schema(engine)
    logger.info("Ledger schema ready: %s", ", ".join(created))

    if args.audit:
        with session_scope(engine=engine) as session:
            report = IntegrityService().audit(session)
        engine.dispose()
        return 0 if report.is_clean else 1

    engine.dispose()
    return 0


def configure_logging() -> None:
    """Console logging, plus one file per day under ``LOG_DIR`` when it is set."""

    settings = get_settings()
    init_logging(app_name="init-db", level=settings.log_level, log_dir=settings.log_dir)


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
