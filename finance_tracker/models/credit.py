from enum import Enum

from pydantic import Field, field_validator

from finance_tracker.models.base import CamelModel, Record


class CreditType(str, Enum):
    BORROWED = "Borrowed"
    LENT = "Lent"


class CreditBase(CamelModel):
    """Money borrowed from, or lent to, a person."""
    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1)
    creditor: str = Field(..., min_length=1)
    credit_type: CreditType = CreditType.BORROWED

    @field_validator("credit_type", mode="before")
    @classmethod
    def normalize_credit_type(cls, value):
        if value is None:
            return CreditType.BORROWED
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "borrowed":
                return CreditType.BORROWED
            if normalized == "lent":
                return CreditType.LENT
            raise ValueError('creditType must be either "BORROWED"/"Borrowed" or "LENT"/"Lent"')
        return value


class CreditCreate(CreditBase):
    pass


class Credit(CreditBase, Record):
    pass
