"""Spending categories and their subcategories."""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import ID_TYPE, NAME_TYPE, Base

if TYPE_CHECKING:
    from .transactions import Transaction


class Category(Base):
    """User-owned top-level category."""

    __tablename__ = "categories"

    category_id: Mapped[str] = mapped_column(ID_TYPE, primary_key=True)
    name: Mapped[str] = mapped_column(NAME_TYPE, nullable=False)
    user_id: Mapped[str] = mapped_column(ID_TYPE, nullable=False)

    subcategories: Mapped[list["Subcategory"]] = relationship(
        back_populates="category", cascade="all, delete-orphan", passive_deletes=True
    )
    # Loaded transactions get category_id cleared, matching ON DELETE SET NULL.
    transactions: Mapped[list["Transaction"]] = relationship(
        back_populates="category", passive_deletes=True
    )


class Subcategory(Base):
    """Child of exactly one category; removed together with it."""

    __tablename__ = "subcategories"

    subcategory_id: Mapped[str] = mapped_column(ID_TYPE, primary_key=True)
    name: Mapped[str] = mapped_column(NAME_TYPE, nullable=False)
    category_id: Mapped[str] = mapped_column(
        ID_TYPE,
        ForeignKey("categories.category_id", ondelete="CASCADE"),
        nullable=False,
    )

    category: Mapped[Category] = relationship(back_populates="subcategories")
