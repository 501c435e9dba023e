"""Installment plans splitting a total amount over several transactions."""
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import ID_TYPE, Base

if TYPE_CHECKING:
    from .transactions import Transaction


class InstallmentPlan(Base):
    """Recurring payment schedule owned by a user."""

    __tablename__ = "installment_plans"

    installment_plan_id: Mapped[str] = mapped_column(ID_TYPE, primary_key=True)
    total_amount: Mapped[int] = mapped_column(Integer, nullable=False)
    number_of_installments: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str | None] = mapped_column(String(512))
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime | None] = mapped_column(DateTime)
    user_id: Mapped[str] = mapped_column(ID_TYPE, nullable=False)

    # No delete clause on the foreign key: the database refuses to delete a
    # plan that transactions still point at, and the ORM must not pre-empt it.
    transactions: Mapped[list["Transaction"]] = relationship(
        back_populates="installment_plan", passive_deletes="all"
    )
