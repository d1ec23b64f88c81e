from typing import Any, Dict, Optional

from finance_tracker.models.budget import Budget, BudgetCreate
from finance_tracker.repositories.base import JsonRepository
from finance_tracker.utils.validation import DuplicateBudget


class BudgetRepository(JsonRepository[Budget]):
    """Budgets; one per (category, period)."""

    collection = "budgets"
    model = Budget

    def payload_fields(self, payload: BudgetCreate) -> Dict[str, Any]:
        return {
            "category": payload.category,
            "budgetType": payload.budget_type.value,
            "period": payload.period,
            "amount": payload.resolved_amount(),
            "percentage": payload.resolved_percentage(),
        }

    def find_by_category(self, category: str, period: str) -> Optional[Budget]:
        for budget in self.list_all():
            if budget.category == category and budget.period == period:
                return budget
        return None

    def create(self, payload: BudgetCreate) -> Budget:
        if self.find_by_category(payload.category, payload.period) is not None:
            raise DuplicateBudget("Budget already exists for this category and period")
        return super().create(payload)

    def update(self, record_id: int, payload: BudgetCreate) -> Optional[Budget]:
        existing = self.find_by_category(payload.category, payload.period)
        if existing is not None and existing.id != record_id:
            raise DuplicateBudget("Budget already exists for this category and period")
        return super().update(record_id, payload)
