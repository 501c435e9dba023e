"""Accounts that transactions are booked against."""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import ID_TYPE, NAME_TYPE, Base

if TYPE_CHECKING:
    from .transactions import Transaction


class Account(Base):
    """User-owned account (bank, card, cash)."""

    __tablename__ = "accounts"

    account_id: Mapped[str] = mapped_column(ID_TYPE, primary_key=True)
    name: Mapped[str] = mapped_column(NAME_TYPE, nullable=False)
    user_id: Mapped[str] = mapped_column(ID_TYPE, nullable=False)

    transactions: Mapped[list["Transaction"]] = relationship(
        back_populates="account", cascade="all, delete-orphan", passive_deletes=True
    )
