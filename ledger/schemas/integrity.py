"""Report payloads for the application-level integrity audit."""

from __future__ import annotations

from pydantic import BaseModel, computed_field


class SplitImbalance(BaseModel):
    """A transaction whose user splits do not add up to its amount."""

    transaction_id: str
    amount: int
    split_total: int
    split_count: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def difference(self) -> int:
        return self.amount - self.split_total


class IncompleteInstallment(BaseModel):
    """A transaction carrying only one of the two installment fields."""

    transaction_id: str
    installment_plan_id: str | None = None
    installment_number: int | None = None


class IntegrityReport(BaseModel):
    unbalanced_splits: list[SplitImbalance] = []
    incomplete_installments: list[IncompleteInstallment] = []

    @property
    def is_clean(self) -> bool:
        return not self.unbalanced_splits and not self.incomplete_installments
