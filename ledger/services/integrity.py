"""Audits for invariants the schema leaves to the application.

Neither rule is a database constraint: splits may be written one at a time
and installment fields may be filled in stages. The audit only reports.
"""
from __future__ import annotations

from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session

from ledger.core.log import get_logger, log_context, timeit
from ledger.models import Transaction, TransactionUser
from ledger.schemas.integrity import (
    IncompleteInstallment,
    IntegrityReport,
    SplitImbalance,
)

LOGGER = get_logger(__name__)


class IntegrityService:
    """Read-only checks over transactions and their splits."""

    def find_unbalanced_splits(self, session: Session) -> list[SplitImbalance]:
        """Transactions with at least one split whose split total differs from the amount."""

        split_total = func.sum(TransactionUser.amount)
        stmt = (
            select(
                Transaction.transaction_id,
                Transaction.amount,
                split_total.label("split_total"),
                func.count(TransactionUser.transaction_user_id).label("split_count"),
            )
            .join(TransactionUser, TransactionUser.transaction_id == Transaction.transaction_id)
            .group_by(Transaction.transaction_id, Transaction.amount)
            .having(split_total != Transaction.amount)
            .order_by(Transaction.transaction_id)
        )
        return [
            SplitImbalance(
                transaction_id=row.transaction_id,
                amount=row.amount,
                split_total=int(row.split_total),
                split_count=row.split_count,
            )
            for row in session.execute(stmt)
        ]

    def find_incomplete_installments(self, session: Session) -> list[IncompleteInstallment]:
        """Transactions where exactly one of plan id / installment number is set."""

        stmt = (
            select(
                Transaction.transaction_id,
                Transaction.installment_plan_id,
                Transaction.installment_number,
            )
            .where(
                or_(
                    and_(
                        Transaction.installment_plan_id.is_not(None),
                        Transaction.installment_number.is_(None),
                    ),
                    and_(
                        Transaction.installment_plan_id.is_(None),
                        Transaction.installment_number.is_not(None),
                    ),
                )
            )
            .order_by(Transaction.transaction_id)
        )
        return [
            IncompleteInstallment(
                transaction_id=row.transaction_id,
                installment_plan_id=row.installment_plan_id,
                installment_number=row.installment_number,
            )
            for row in session.execute(stmt)
        ]

    def audit(self, session: Session) -> IntegrityReport:
        """Run every check and log a one-line summary."""

        with log_context.bound(job="integrity_audit"):
            with timeit("Integrity audit", logger=LOGGER, unit="checks", total=2):
                report = IntegrityReport(
                    unbalanced_splits=self.find_unbalanced_splits(session),
                    incomplete_installments=self.find_incomplete_installments(session),
                )
            if report.is_clean:
                LOGGER.info("Integrity audit found no issues")
            else:
                LOGGER.warning(
                    "Integrity audit found %s unbalanced split(s) and %s incomplete installment(s)",
                    len(report.unbalanced_splits),
                    len(report.incomplete_installments),
                )
        return report
