"""Tests for the split and installment audits."""
from __future__ import annotations

from datetime import datetime

import pytest
from sqlalchemy.orm import Session

from ledger.models import Account, InstallmentPlan, Transaction, TransactionUser
from ledger.services import IntegrityService


@pytest.fixture()
def integrity_service() -> IntegrityService:
    return IntegrityService()


def _seed(session: Session) -> None:
    session.add(Account(account_id="a1", name="Checking", user_id="u1"))
    session.add(
        InstallmentPlan(
            installment_plan_id="p1",
            total_amount=600,
            number_of_installments=3,
            start_date=datetime(2024, 1, 1),
            user_id="u1",
        )
    )
    session.flush()

    def txn(transaction_id: str, amount: int, **extra) -> Transaction:
        return Transaction(
            transaction_id=transaction_id,
            amount=amount,
            payee="Shop",
            date=datetime(2024, 1, 1),
            account_id="a1",
            **extra,
        )

    session.add_all(
        [
            txn("t1", 500),
            txn("t2", 200),
            txn("t3", 75),
            txn("t4", 200, installment_plan_id="p1"),
            txn("t5", 200, installment_number=2),
            txn("t6", 200, installment_plan_id="p1", installment_number=3),
        ]
    )
    session.flush()
    session.add_all(
        [
            TransactionUser(transaction_id="t1", user_id="u1", amount=300),
            TransactionUser(transaction_id="t1", user_id="u2", amount=100),
            TransactionUser(transaction_id="t2", user_id="u1", amount=100),
            TransactionUser(transaction_id="t2", user_id="u2", amount=100),
        ]
    )
    session.commit()


def test_unbalanced_splits_are_reported(session: Session, integrity_service: IntegrityService) -> None:
    _seed(session)

    imbalances = integrity_service.find_unbalanced_splits(session)

    assert [item.transaction_id for item in imbalances] == ["t1"]
    assert imbalances[0].amount == 500
    assert imbalances[0].split_total == 400
    assert imbalances[0].split_count == 2
    assert imbalances[0].difference == 100


def test_transactions_without_splits_are_not_flagged(
    session: Session, integrity_service: IntegrityService
) -> None:
    _seed(session)

    flagged = {item.transaction_id for item in integrity_service.find_unbalanced_splits(session)}

    assert "t3" not in flagged


def test_half_set_installments_are_reported(session: Session, integrity_service: IntegrityService) -> None:
    _seed(session)

    incomplete = integrity_service.find_incomplete_installments(session)

    assert [(item.transaction_id, item.installment_plan_id, item.installment_number) for item in incomplete] == [
        ("t4", "p1", None),
        ("t5", None, 2),
    ]


def test_audit_combines_checks(session: Session, integrity_service: IntegrityService) -> None:
    _seed(session)

    report = integrity_service.audit(session)

    assert not report.is_clean
    assert len(report.unbalanced_splits) == 1
    assert len(report.incomplete_installments) == 2


def test_audit_on_empty_ledger_is_clean(session: Session, integrity_service: IntegrityService) -> None:
    report = integrity_service.audit(session)

    assert report.is_clean
    assert report.model_dump()["unbalanced_splits"] == []
