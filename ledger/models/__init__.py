"""Database models for the ledger domain."""
from __future__ import annotations

from .base import Base
from .accounts import Account
from .categories import Category, Subcategory
from .installments import InstallmentPlan
from .transactions import Transaction, TransactionUser

__all__ = [
    "Base",
    "Account",
    "Category",
    "Subcategory",
    "InstallmentPlan",
    "Transaction",
    "TransactionUser",
]
