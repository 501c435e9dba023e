"""Timing helper that logs the duration and throughput of an operation."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Iterator, Optional


@dataclass
class _Timer:
    label: str
    logger: logging.Logger
    level: int
    unit: str
    expected_total: Optional[int]
    start: float = field(default_factory=perf_counter)

    def finish(self, success: bool = True) -> float:
        elapsed = perf_counter() - self.start
        total = self.expected_total

        if success:
            message = f"{self.label} completed in {elapsed:.2f}s"
            if total:
                message += f" ({total:,} {self.unit})"
            self.logger.log(self.level, message)
        else:
            self.logger.error(f"{self.label} failed after {elapsed:.2f}s")
        return elapsed


@contextmanager
def timeit(
    label: str,
    *,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    unit: str = "items",
    total: Optional[int] = None,
) -> Iterator[_Timer]:
    """Time the wrapped block and log the outcome.

    Args:
        label: Description of the operation being timed
        logger: Logger instance to use (defaults to "ledger.timer")
        level: Logging level for the success message
        unit: Unit reported next to the item count (e.g. "tables", "rows")
        total: Item count reported with the success message
    """
    timer = _Timer(
        label=label,
        logger=logger or logging.getLogger("ledger.timer"),
        level=level,
        unit=unit,
        expected_total=total,
    )
    try:
        yield timer
    except Exception:
        timer.finish(success=False)
        raise
    else:
        timer.finish(success=True)
