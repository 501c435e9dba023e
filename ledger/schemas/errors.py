"""Validation failures reported by the insert schemas."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Sequence, TypeVar

from pydantic import ValidationError as PydanticValidationError

T = TypeVar("T")


class Reason(str, Enum):
    """Why a single field was rejected."""

    MISSING = "missing required field"
    WRONG_TYPE = "wrong type"
    NOT_POSITIVE = "must be a positive integer"
    UNPARSEABLE_DATE = "unparseable date"


@dataclass(frozen=True)
class FieldError:
    field: str
    reason: Reason

    def __str__(self) -> str:
        return f"{self.field}: {self.reason.value}"


_REASON_BY_TYPE = {
    "missing": Reason.MISSING,
    "greater_than": Reason.NOT_POSITIVE,
    "date_parsing": Reason.UNPARSEABLE_DATE,
}


def _reason_for(error: dict) -> Reason:
    kind = error["type"]
    # An explicit null for a required column counts as absent.
    if kind.endswith("_type") and error.get("input", ...) is None:
        return Reason.MISSING
    return _REASON_BY_TYPE.get(kind, Reason.WRONG_TYPE)


class ValidationError(ValueError):
    """A candidate record was rejected; carries every failing field."""

    def __init__(self, entity: str, errors: Sequence[FieldError]) -> None:
        if not errors:
            raise ValueError("ValidationError requires at least one field error")
        self.entity = entity
        self.errors: tuple[FieldError, ...] = tuple(errors)
        details = "; ".join(str(err) for err in self.errors)
        super().__init__(f"invalid {entity}: {details}")

    @property
    def field(self) -> str:
        """Name of the first failing field."""

        return self.errors[0].field

    @property
    def reason(self) -> Reason:
        return self.errors[0].reason

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(err.field for err in self.errors)

    def reason_for(self, field: str) -> Reason | None:
        for err in self.errors:
            if err.field == field:
                return err.reason
        return None

    @classmethod
    def from_pydantic(cls, entity: str, exc: PydanticValidationError) -> "ValidationError":
        errors = [
            FieldError(
                field=".".join(str(part) for part in err["loc"]) or "__root__",
                reason=_reason_for(err),
            )
            for err in exc.errors()
        ]
        return cls(entity, errors)


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Tagged outcome of a validator: a normalized record or the error."""

    record: T | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the record, raising the ``ValidationError`` on failure."""

        if self.error is not None:
            raise self.error
        if self.record is None:
            raise RuntimeError("ValidationResult holds neither a record nor an error")
        return self.record

    @classmethod
    def success(cls, record: T) -> "ValidationResult[T]":
        return cls(record=record)

    @classmethod
    def failure(cls, error: ValidationError) -> "ValidationResult[T]":
        return cls(error=error)
