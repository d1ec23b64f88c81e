"""
Expense and income records.

Both carry a calendar ``date`` (no time zone); monthly reports group on it.
"""

from datetime import date as Date

from pydantic import Field

from finance_tracker.models.base import CamelModel, Record


class ExpenseBase(CamelModel):
    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    date: Date = Field(default_factory=Date.today)
    payment_mode: str = "Cash"
    note: str = ""


class ExpenseCreate(ExpenseBase):
    pass


class Expense(ExpenseBase, Record):
    pass


class IncomeBase(CamelModel):
    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1)
    source: str = Field(..., min_length=1)
    date: Date = Field(default_factory=Date.today)
    payment_mode: str = "Cash"
    note: str = ""


class IncomeCreate(IncomeBase):
    pass


class Income(IncomeBase, Record):
    pass
