"""Coercion of date-like input into ``datetime`` values."""
from __future__ import annotations

import math
from datetime import date, datetime, time, timezone
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

_DATETIME = TypeAdapter(datetime)

# Above this pydantic reads a number as milliseconds rather than seconds.
_MAX_EPOCH_SECONDS = 2e10


def _unparseable(value: Any) -> PydanticCustomError:
    return PydanticCustomError(
        "date_parsing", "unparseable date: {value}", {"value": repr(value)}
    )


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _is_numeric_text(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def coerce_datetime(value: Any) -> Any:
    """Normalize date-like input to a naive UTC ``datetime``.

    Strings and numbers go through pydantic's datetime parsing. Numbers are
    epoch milliseconds, as JavaScript ``Date`` values are; numeric strings
    are refused. A ``date`` becomes midnight. ``None`` passes through so
    required/optional handling stays with the field definition.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise _unparseable(value)
    if isinstance(value, datetime):
        return _to_naive_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time())

    candidate = value
    if isinstance(value, (int, float)):
        candidate = value / 1000
        if not math.isfinite(candidate) or abs(candidate) > _MAX_EPOCH_SECONDS:
            raise _unparseable(value)
    elif isinstance(value, str) and _is_numeric_text(value.strip()):
        raise _unparseable(value)

    try:
        parsed = _DATETIME.validate_python(candidate)
    except PydanticValidationError:
        raise _unparseable(value) from None
    return _to_naive_utc(parsed)
