from datetime import date as Date
from typing import List, Optional

from finance_tracker.models.base import CamelModel, Money
from finance_tracker.models.ledger import LedgerEntry, LedgerEntryType
from finance_tracker.services.ledger import LedgerLine, LedgerSide, LedgerStatement


class LedgerLineResponse(CamelModel):
    """Ledger entry with the party balance after it."""
    id: int
    party_id: int
    date: Date
    type: LedgerEntryType
    amount: Money
    description: str = ""
    reference: Optional[str] = None
    payment_mode: Optional[str] = None
    side: LedgerSide
    running_balance: Money

    @classmethod
    def from_line(cls, line: LedgerLine) -> "LedgerLineResponse":
        entry = line.entry
        if not isinstance(entry, LedgerEntry):
            entry = LedgerEntry.model_validate(entry)
        return cls(
            id=entry.id,
            party_id=entry.party_id,
            date=line.date,
            type=line.type,
            amount=line.amount,
            description=entry.description,
            reference=entry.reference,
            payment_mode=entry.payment_mode,
            side=line.side,
            running_balance=line.running_balance,
        )


class PartySummary(CamelModel):
    """Figures for the opening / paid / remaining summary cards."""
    party_id: int
    opening_balance: Money
    total_purchases: Money
    total_payments: Money
    current_balance: Money
    transaction_count: int

    @classmethod
    def from_statement(cls, party_id: int, statement: LedgerStatement) -> "PartySummary":
        return cls(
            party_id=party_id,
            opening_balance=statement.opening_balance,
            total_purchases=statement.total_purchases,
            total_payments=statement.total_payments,
            current_balance=statement.current_balance,
            transaction_count=statement.transaction_count,
        )


class PartyLedgerResponse(PartySummary):
    side: LedgerSide
    entries: List[LedgerLineResponse]


class OutstandingResponse(CamelModel):
    party_id: int
    outstanding: Money
