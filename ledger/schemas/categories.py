"""Insert schemas for categories and subcategories."""
from __future__ import annotations

from typing import Any, Mapping

from .base import InsertSchema, validate_record
from .errors import ValidationResult


class CategoryCreate(InsertSchema):
    category_id: str
    name: str
    user_id: str


class SubcategoryCreate(InsertSchema):
    subcategory_id: str
    name: str
    category_id: str


def validate_category(data: Mapping[str, Any]) -> ValidationResult[CategoryCreate]:
    return validate_record(CategoryCreate, data, entity="category")


def validate_subcategory(data: Mapping[str, Any]) -> ValidationResult[SubcategoryCreate]:
    return validate_record(SubcategoryCreate, data, entity="subcategory")
