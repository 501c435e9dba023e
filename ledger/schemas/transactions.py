"""Insert schemas for transactions and their per-user splits."""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Mapping, Optional

from pydantic import Field, field_validator

from .base import InsertSchema, validate_record
from .coercion import coerce_datetime
from .errors import ValidationResult


class TransactionCreate(InsertSchema):
    """Candidate transaction.

    ``installment_plan_id`` and ``installment_number`` are meant to travel
    together but either may be given alone; see
    :func:`ledger.services.integrity.find_incomplete_installments`.
    """

    transaction_id: str
    amount: int
    payee: str
    notes: Optional[str] = None
    date: datetime
    account_id: str
    category_id: Optional[str] = None
    installment_plan_id: Optional[str] = None
    installment_number: Optional[Annotated[int, Field(gt=0)]] = None

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> Any:
        return coerce_datetime(value)


class TransactionUserCreate(InsertSchema):
    """One user's share; ``transaction_user_id`` is assigned by the database."""

    transaction_id: str
    user_id: str
    amount: int


def validate_transaction(data: Mapping[str, Any]) -> ValidationResult[TransactionCreate]:
    return validate_record(TransactionCreate, data, entity="transaction")


def validate_transaction_user(
    data: Mapping[str, Any],
) -> ValidationResult[TransactionUserCreate]:
    return validate_record(TransactionUserCreate, data, entity="transaction_user")
