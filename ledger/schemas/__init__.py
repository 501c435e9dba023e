"""Hand-written insert schemas and validators, one per ledger table."""

from .accounts import AccountCreate, validate_account
from .base import InsertSchema, validate_record
from .categories import (
    CategoryCreate,
    SubcategoryCreate,
    validate_category,
    validate_subcategory,
)
from .coercion import coerce_datetime
from .errors import FieldError, Reason, ValidationError, ValidationResult
from .installments import InstallmentPlanCreate, validate_installment_plan
from .transactions import (
    TransactionCreate,
    TransactionUserCreate,
    validate_transaction,
    validate_transaction_user,
)

__all__ = [
    "AccountCreate",
    "CategoryCreate",
    "FieldError",
    "InsertSchema",
    "InstallmentPlanCreate",
    "Reason",
    "SubcategoryCreate",
    "TransactionCreate",
    "TransactionUserCreate",
    "ValidationError",
    "ValidationResult",
    "coerce_datetime",
    "validate_account",
    "validate_category",
    "validate_installment_plan",
    "validate_record",
    "validate_subcategory",
    "validate_transaction",
    "validate_transaction_user",
]
