"""Insert schema for accounts."""
from __future__ import annotations

from typing import Any, Mapping

from .base import InsertSchema, validate_record
from .errors import ValidationResult


class AccountCreate(InsertSchema):
    account_id: str
    name: str
    user_id: str


def validate_account(data: Mapping[str, Any]) -> ValidationResult[AccountCreate]:
    return validate_record(AccountCreate, data, entity="account")
