"""Tests for the entity registry and its relationship table."""
from __future__ import annotations

import dataclasses

import pytest

from ledger.models import Base, Transaction, TransactionUser
from ledger.registry import (
    RELATIONSHIPS,
    DeleteAction,
    DeleteEffect,
    SchemaRegistry,
    relationships_from_metadata,
)
from ledger.schemas import Reason, TransactionCreate


def test_relationship_table_matches_declared_foreign_keys() -> None:
    assert set(RELATIONSHIPS) == set(relationships_from_metadata())
    assert len(RELATIONSHIPS) == len(relationships_from_metadata())


def test_every_table_is_registered(registry: SchemaRegistry) -> None:
    assert {entity.table for entity in registry.entities} == set(Base.metadata.tables)


def test_primary_keys_match_models(registry: SchemaRegistry) -> None:
    for entity in registry.entities:
        table = Base.metadata.tables[entity.table]
        assert [column.name for column in table.primary_key.columns] == [entity.primary_key]


def test_only_splits_have_an_auto_assigned_key(registry: SchemaRegistry) -> None:
    auto = [entity.name for entity in registry.entities if entity.auto_primary_key]
    assert auto == ["transaction_user"]
    assert "transaction_user_id" not in registry.entity("transaction_user").schema.model_fields


def test_lookup_by_name_or_table(registry: SchemaRegistry) -> None:
    assert registry.entity("transaction").model is Transaction
    assert registry.entity("transaction_users").model is TransactionUser
    assert registry.for_table("transactions").schema is TransactionCreate

    with pytest.raises(KeyError):
        registry.entity("budget")
    with pytest.raises(KeyError):
        registry.for_table("transaction")


def test_references_and_dependents(registry: SchemaRegistry) -> None:
    outgoing = {(rule.child_column, rule.on_delete) for rule in registry.references_from("transactions")}
    assert outgoing == {
        ("account_id", DeleteAction.CASCADE),
        ("category_id", DeleteAction.SET_NULL),
        ("installment_plan_id", DeleteAction.UNSPECIFIED),
    }

    incoming = {(rule.child_table, rule.on_delete) for rule in registry.dependents_of("categories")}
    assert incoming == {
        ("subcategories", DeleteAction.CASCADE),
        ("transactions", DeleteAction.SET_NULL),
    }
    assert registry.dependents_of("transaction_users") == ()


def test_required_references_are_not_nullable(registry: SchemaRegistry) -> None:
    for rule in registry.relationships:
        assert rule.nullable is (rule.on_delete is not DeleteAction.CASCADE)


def test_delete_effects_follow_cascades(registry: SchemaRegistry) -> None:
    effects = registry.delete_effects("accounts")

    assert effects == (
        DeleteEffect("transactions", "account_id", DeleteAction.CASCADE, 1),
        DeleteEffect("transaction_users", "transaction_id", DeleteAction.CASCADE, 2),
    )


def test_delete_effects_stop_at_set_null(registry: SchemaRegistry) -> None:
    effects = {(effect.table, effect.action) for effect in registry.delete_effects("categories")}

    assert effects == {
        ("subcategories", DeleteAction.CASCADE),
        ("transactions", DeleteAction.SET_NULL),
    }


def test_delete_effects_report_restricting_references(registry: SchemaRegistry) -> None:
    assert registry.delete_effects("installment_plans") == (
        DeleteEffect("transactions", "installment_plan_id", DeleteAction.UNSPECIFIED, 1),
    )
    assert registry.delete_effects("subcategories") == ()


def test_validate_dispatches_by_entity(registry: SchemaRegistry) -> None:
    ok = registry.validate("category", {"category_id": "c1", "name": "Food", "user_id": "u1"})
    bad = registry.validate("transactions", {"transaction_id": "t1"})

    assert ok.ok
    assert not bad.ok
    assert bad.error.entity == "transaction"
    assert bad.error.reason_for("amount") is Reason.MISSING


def test_registry_is_immutable(registry: SchemaRegistry) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        registry.entities = ()  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        RELATIONSHIPS[0].on_delete = DeleteAction.SET_NULL  # type: ignore[misc]


def test_delete_action_from_ondelete() -> None:
    assert DeleteAction.from_ondelete(None) is DeleteAction.UNSPECIFIED
    assert DeleteAction.from_ondelete("cascade") is DeleteAction.CASCADE
    assert DeleteAction.from_ondelete("SET NULL") is DeleteAction.SET_NULL
