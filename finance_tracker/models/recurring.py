from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator, model_validator

from finance_tracker.models.base import CamelModel, Record


class RecurringType(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"


class Frequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class RecurringItemBase(CamelModel):
    """An expense or income that repeats on a schedule."""
    type: RecurringType
    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1)
    category: Optional[str] = None
    source: Optional[str] = None
    frequency: Frequency
    start_date: date
    end_date: Optional[date] = None
    is_active: bool = True

    @field_validator("type", "frequency", mode="before")
    @classmethod
    def lowercase(cls, value):
        return value.lower() if isinstance(value, str) else value

    @model_validator(mode="after")
    def check_target_field(self):
        if self.type == RecurringType.EXPENSE and not self.category:
            raise ValueError("Category is required for expenses")
        if self.type == RecurringType.INCOME and not self.source:
            raise ValueError("Source is required for income")
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class RecurringItemCreate(RecurringItemBase):
    pass


class RecurringItem(RecurringItemBase, Record):
    last_generated: Optional[date] = None


class ExpenseTemplateBase(CamelModel):
    """A saved expense shape for quick entry."""
    name: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)
    category: str = Field(..., min_length=1)
    payment_mode: str = "Cash"
    note: str = ""


class ExpenseTemplateCreate(ExpenseTemplateBase):
    pass


class ExpenseTemplate(ExpenseTemplateBase, Record):
    pass
