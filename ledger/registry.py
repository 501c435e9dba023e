"""Immutable catalogue of the ledger entities and the foreign keys between them.

The registry is built once with :func:`build_registry` and handed to whatever
data-access code needs it. Relations are described by table and column names,
never by object references, so the graph (categories, subcategories,
transactions, transaction_users) has no ownership cycles.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ledger.models import (
    Account,
    Base,
    Category,
    InstallmentPlan,
    Subcategory,
    Transaction,
    TransactionUser,
)
from ledger.schemas import (
    AccountCreate,
    CategoryCreate,
    InsertSchema,
    InstallmentPlanCreate,
    SubcategoryCreate,
    TransactionCreate,
    TransactionUserCreate,
    ValidationResult,
    validate_account,
    validate_category,
    validate_installment_plan,
    validate_subcategory,
    validate_transaction,
    validate_transaction_user,
)


class DeleteAction(str, Enum):
    """What happens to a referencing row when its parent is deleted."""

    CASCADE = "CASCADE"
    SET_NULL = "SET NULL"
    UNSPECIFIED = "UNSPECIFIED"

    @classmethod
    def from_ondelete(cls, ondelete: str | None) -> "DeleteAction":
        if ondelete is None:
            return cls.UNSPECIFIED
        return cls(ondelete.upper())


@dataclass(frozen=True)
class ForeignKeyRule:
    """Directed edge: ``child_table.child_column`` references ``parent_table``."""

    child_table: str
    child_column: str
    parent_table: str
    parent_column: str
    on_delete: DeleteAction
    nullable: bool


RELATIONSHIPS: tuple[ForeignKeyRule, ...] = (
    ForeignKeyRule(
        "subcategories", "category_id", "categories", "category_id",
        DeleteAction.CASCADE, nullable=False,
    ),
    ForeignKeyRule(
        "transactions", "account_id", "accounts", "account_id",
        DeleteAction.CASCADE, nullable=False,
    ),
    ForeignKeyRule(
        "transactions", "category_id", "categories", "category_id",
        DeleteAction.SET_NULL, nullable=True,
    ),
    ForeignKeyRule(
        "transactions", "installment_plan_id", "installment_plans", "installment_plan_id",
        DeleteAction.UNSPECIFIED, nullable=True,
    ),
    ForeignKeyRule(
        "transaction_users", "transaction_id", "transactions", "transaction_id",
        DeleteAction.CASCADE, nullable=False,
    ),
)


@dataclass(frozen=True)
class EntityDefinition:
    name: str
    table: str
    model: type[Base]
    primary_key: str
    schema: type[InsertSchema]
    validator: Callable[[Mapping[str, Any]], ValidationResult[Any]]
    auto_primary_key: bool = False


@dataclass(frozen=True)
class DeleteEffect:
    """A row change in ``table`` triggered by deleting from another table."""

    table: str
    column: str
    action: DeleteAction
    depth: int


@dataclass(frozen=True)
class SchemaRegistry:
    entities: tuple[EntityDefinition, ...]
    relationships: tuple[ForeignKeyRule, ...]

    def entity(self, name: str) -> EntityDefinition:
        """Look up an entity by name (``"transaction"``) or table (``"transactions"``)."""

        for definition in self.entities:
            if name in (definition.name, definition.table):
                return definition
        raise KeyError(f"unknown entity: {name!r}")

    def for_table(self, table: str) -> EntityDefinition:
        for definition in self.entities:
            if definition.table == table:
                return definition
        raise KeyError(f"unknown table: {table!r}")

    def references_from(self, table: str) -> tuple[ForeignKeyRule, ...]:
        """Foreign keys declared on ``table``."""

        return tuple(rule for rule in self.relationships if rule.child_table == table)

    def dependents_of(self, table: str) -> tuple[ForeignKeyRule, ...]:
        """Foreign keys in other tables that point at ``table``."""

        return tuple(rule for rule in self.relationships if rule.parent_table == table)

    def delete_effects(self, table: str) -> tuple[DeleteEffect, ...]:
        """Everything a delete on ``table`` triggers, following cascades transitively.

        ``UNSPECIFIED`` edges are reported too: a referencing row makes the
        database reject the delete.
        """

        effects: list[DeleteEffect] = []
        frontier = [(table, 1)]
        seen = {table}
        while frontier:
            current, depth = frontier.pop(0)
            for rule in self.dependents_of(current):
                effects.append(
                    DeleteEffect(rule.child_table, rule.child_column, rule.on_delete, depth)
                )
                if rule.on_delete is DeleteAction.CASCADE and rule.child_table not in seen:
                    seen.add(rule.child_table)
                    frontier.append((rule.child_table, depth + 1))
        return tuple(effects)

    def validate(self, name: str, data: Mapping[str, Any]) -> ValidationResult[Any]:
        """Validate ``data`` with the validator registered for ``name``."""

        return self.entity(name).validator(data)


def build_registry() -> SchemaRegistry:
    """Assemble the registry for the six ledger tables."""

    entities = (
        EntityDefinition("category", "categories", Category, "category_id",
                         CategoryCreate, validate_category),
        EntityDefinition("subcategory", "subcategories", Subcategory, "subcategory_id",
                         SubcategoryCreate, validate_subcategory),
        EntityDefinition("account", "accounts", Account, "account_id",
                         AccountCreate, validate_account),
        EntityDefinition("installment_plan", "installment_plans", InstallmentPlan,
                         "installment_plan_id", InstallmentPlanCreate,
                         validate_installment_plan),
        EntityDefinition("transaction", "transactions", Transaction, "transaction_id",
                         TransactionCreate, validate_transaction),
        EntityDefinition("transaction_user", "transaction_users", TransactionUser,
                         "transaction_user_id", TransactionUserCreate,
                         validate_transaction_user, auto_primary_key=True),
    )
    return SchemaRegistry(entities=entities, relationships=RELATIONSHIPS)


def relationships_from_metadata() -> tuple[ForeignKeyRule, ...]:
    """Read the foreign keys actually declared on ``Base.metadata``."""

    rules: list[ForeignKeyRule] = []
    for table in Base.metadata.sorted_tables:
        for fk in sorted(table.foreign_keys, key=lambda item: item.parent.name):
            rules.append(
                ForeignKeyRule(
                    child_table=table.name,
                    child_column=fk.parent.name,
                    parent_table=fk.column.table.name,
                    parent_column=fk.column.name,
                    on_delete=DeleteAction.from_ondelete(fk.ondelete),
                    nullable=bool(fk.parent.nullable),
                )
            )
    return tuple(rules)
