"""
Ledger model - purchases, payments and adjustments against a party.

Design principles:
- Every entry belongs to exactly one party
- Purchases and payments carry a positive amount
- Adjustments carry a signed, non-zero amount
- Ordering key is the entry date; equal dates keep insertion order
"""

from datetime import date as Date
from enum import Enum
from typing import Optional

from pydantic import field_validator, model_validator

from finance_tracker.models.base import CamelModel, Money, Record


class LedgerEntryType(str, Enum):
    PURCHASE = "purchase"
    PAYMENT = "payment"
    ADJUSTMENT = "adjustment"


class LedgerEntryBase(CamelModel):
    party_id: int
    date: Date
    type: LedgerEntryType
    amount: Money
    description: str = ""
    reference: Optional[str] = None
    payment_mode: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def lowercase_type(cls, value):
        # Clients send PURCHASE / PAYMENT / ADJUSTMENT as well.
        return value.lower() if isinstance(value, str) else value

    @model_validator(mode="after")
    def check_amount_sign(self):
        if self.type == LedgerEntryType.ADJUSTMENT:
            if self.amount == 0:
                raise ValueError("Adjustment amount must not be zero")
        elif self.amount <= 0:
            raise ValueError("Amount must be a positive number")
        return self


class LedgerEntryCreate(LedgerEntryBase):
    pass


class LedgerEntry(LedgerEntryBase, Record):
    pass
