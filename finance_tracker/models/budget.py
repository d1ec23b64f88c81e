from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field, model_validator

from finance_tracker.models.base import CamelModel, Record


class BudgetType(str, Enum):
    FIXED = "fixed"
    PERCENTAGE = "percentage"


class BudgetBase(CamelModel):
    category: str = Field(..., min_length=1)
    budget_type: BudgetType
    period: str = Field(..., min_length=1)
    amount: Optional[float] = None
    percentage: Optional[float] = None


class BudgetCreate(BudgetBase):
    """
    Budget payload.

    A percentage budget is a share of ``monthly_income``; its amount is
    derived when the budget is stored.
    """
    monthly_income: float = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_budget_type(self):
        if self.budget_type == BudgetType.PERCENTAGE:
            if self.percentage is None or not 0 < self.percentage <= 100:
                raise ValueError("Percentage must be between 0 and 100")
        elif self.amount is None or self.amount <= 0:
            raise ValueError("Amount must be greater than 0")
        return self

    def resolved_amount(self) -> float:
        if self.budget_type == BudgetType.FIXED:
            return float(self.amount)
        return self.percentage / 100 * self.monthly_income

    def resolved_percentage(self) -> Optional[float]:
        return self.percentage if self.budget_type == BudgetType.PERCENTAGE else None


class Budget(BudgetBase, Record):
    pass


class SavingsGoalBase(CamelModel):
    name: str = Field(..., min_length=1)
    target_amount: float = Field(..., gt=0)
    current_amount: float = Field(default=0, ge=0)
    target_date: Optional[date] = None
    description: str = ""


class SavingsGoalCreate(SavingsGoalBase):
    pass


class SavingsGoal(SavingsGoalBase, Record):
    pass
