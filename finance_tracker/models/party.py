from decimal import Decimal
from typing import Optional

from pydantic import Field

from finance_tracker.models.base import CamelModel, Money, Record


class PartyBase(CamelModel):
    """A supplier or customer with a running balance."""
    name: str = Field(..., min_length=1, max_length=200)
    contact: Optional[str] = None
    opening_balance: Money = Decimal("0")
    notes: str = ""


class PartyCreate(PartyBase):
    pass


class Party(PartyBase, Record):
    pass


class PartyWithTotals(Party):
    """
    Party plus figures derived from its ledger entries.

    When the ledger cannot be totalled the figures are None and
    ``ledger_error`` says why.
    """
    total_purchases: Optional[Money] = None
    total_payments: Optional[Money] = None
    current_balance: Optional[Money] = None
    transaction_count: Optional[int] = None
    ledger_error: Optional[str] = None
