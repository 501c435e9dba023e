"""Insert schema for installment plans."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic import field_validator

from .base import InsertSchema, validate_record
from .coercion import coerce_datetime
from .errors import ValidationResult


class InstallmentPlanCreate(InsertSchema):
    """Candidate installment plan; both dates accept any date-like input."""

    installment_plan_id: str
    total_amount: int
    number_of_installments: int
    description: Optional[str] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    user_id: str

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def coerce_dates(cls, value: Any) -> Any:
        return coerce_datetime(value)


def validate_installment_plan(
    data: Mapping[str, Any],
) -> ValidationResult[InstallmentPlanCreate]:
    return validate_record(InstallmentPlanCreate, data, entity="installment_plan")
