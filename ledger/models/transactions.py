"""Transactions and the per-user splits of their amounts."""
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import ID_TYPE, NAME_TYPE, Base

if TYPE_CHECKING:
    from .accounts import Account
    from .categories import Category
    from .installments import InstallmentPlan


class Transaction(Base):
    """A single booking on an account, optionally categorised and part of a plan."""

    __tablename__ = "transactions"

    transaction_id: Mapped[str] = mapped_column(ID_TYPE, primary_key=True)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    payee: Mapped[str] = mapped_column(NAME_TYPE, nullable=False)
    notes: Mapped[str | None] = mapped_column(String(1024))
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    account_id: Mapped[str] = mapped_column(
        ID_TYPE,
        ForeignKey("accounts.account_id", ondelete="CASCADE"),
        nullable=False,
    )
    category_id: Mapped[str | None] = mapped_column(
        ID_TYPE, ForeignKey("categories.category_id", ondelete="SET NULL")
    )
    installment_plan_id: Mapped[str | None] = mapped_column(
        ID_TYPE, ForeignKey("installment_plans.installment_plan_id")
    )
    installment_number: Mapped[int | None] = mapped_column(Integer)

    account: Mapped["Account"] = relationship(back_populates="transactions")
    category: Mapped["Category | None"] = relationship(back_populates="transactions")
    installment_plan: Mapped["InstallmentPlan | None"] = relationship(
        back_populates="transactions"
    )
    transaction_users: Mapped[list["TransactionUser"]] = relationship(
        back_populates="transaction", cascade="all, delete-orphan", passive_deletes=True
    )


class TransactionUser(Base):
    """One user's share of a transaction amount."""

    __tablename__ = "transaction_users"

    transaction_user_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    transaction_id: Mapped[str] = mapped_column(
        ID_TYPE,
        ForeignKey("transactions.transaction_id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[str] = mapped_column(ID_TYPE, nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)

    transaction: Mapped[Transaction] = relationship(back_populates="transaction_users")
