"""Shared pieces of the hand-written insert schemas."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ledger.core.log import get_logger

from .errors import FieldError, Reason, ValidationError, ValidationResult

LOGGER = get_logger(__name__)


class InsertSchema(BaseModel):
    """Strictly typed candidate row; unknown keys are dropped."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    def to_row(self) -> dict[str, Any]:
        """Normalized field map, ready for the model constructor or ``insert()``."""

        return self.model_dump()


S = TypeVar("S", bound=InsertSchema)


def validate_record(schema: type[S], data: Any, *, entity: str) -> ValidationResult[S]:
    """Run ``schema`` over ``data`` and wrap the outcome."""

    if not isinstance(data, Mapping):
        error = ValidationError(entity, [FieldError("__root__", Reason.WRONG_TYPE)])
        return ValidationResult.failure(error)

    try:
        record = schema.model_validate(dict(data))
    except PydanticValidationError as exc:
        error = ValidationError.from_pydantic(entity, exc)
        LOGGER.debug(
            "Rejected %s: %s",
            entity,
            ", ".join(str(err) for err in error.errors),
        )
        return ValidationResult.failure(error)
    return ValidationResult.success(record)
