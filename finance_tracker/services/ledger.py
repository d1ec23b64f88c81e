"""
Party ledger balance calculation.

Core algorithm:
1. Sort entries by date ascending. The sort is stable, so entries sharing a
   date keep the order they were given in (insertion order when they come
   from the repository).
2. Fold from the opening balance: purchases add, payments subtract,
   adjustments add their signed amount.
3. Record the running balance after every entry and accumulate totals.

Totals reconcile exactly:
    current_balance == opening_balance + total_purchases - total_payments
Positive adjustments count as purchases, negative adjustments as payments.

Everything here is pure: no I/O, inputs are never mutated.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, List, Tuple

from finance_tracker.models.ledger import LedgerEntryType

ZERO = Decimal("0")


class InvalidEntryType(ValueError):
    """A ledger entry type outside purchase / payment / adjustment."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid ledger entry type: {value!r}")


class LedgerSide(str, Enum):
    ALL = "all"
    CREDIT = "credit"  # purchases and positive adjustments
    DEBIT = "debit"    # payments and negative adjustments


@dataclass(frozen=True)
class LedgerLine:
    """One entry with the balance after applying it."""
    entry: Any
    date: date
    type: LedgerEntryType
    amount: Decimal
    running_balance: Decimal

    @property
    def side(self) -> LedgerSide:
        if self.type == LedgerEntryType.PURCHASE:
            return LedgerSide.CREDIT
        if self.type == LedgerEntryType.PAYMENT:
            return LedgerSide.DEBIT
        return LedgerSide.CREDIT if self.amount > 0 else LedgerSide.DEBIT


@dataclass(frozen=True)
class LedgerStatement:
    opening_balance: Decimal
    lines: Tuple[LedgerLine, ...]
    total_purchases: Decimal
    total_payments: Decimal
    current_balance: Decimal

    @property
    def transaction_count(self) -> int:
        return len(self.lines)

    @property
    def running_balances(self) -> List[Decimal]:
        return [line.running_balance for line in self.lines]


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def parse_entry_type(value: Any) -> LedgerEntryType:
    """Map a raw type to the enum; anything unrecognized is an error."""
    if isinstance(value, LedgerEntryType):
        return value
    if isinstance(value, str):
        try:
            return LedgerEntryType(value.lower())
        except ValueError:
            pass
    raise InvalidEntryType(value)


def parse_entry_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value)
    if len(text) > 10:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    return date.fromisoformat(text)


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, dict):
        return entry.get(name)
    return getattr(entry, name, None)


def compute_ledger(opening_balance: Any, entries: Iterable[Any]) -> LedgerStatement:
    """
    Build a party statement from an opening balance and unordered entries.

    ``entries`` may be ``LedgerEntry`` records or mappings with ``date``,
    ``type`` and ``amount``; each is carried through untouched on its line.

    Raises InvalidEntryType if any entry has an unknown type.
    """
    opening = to_decimal(opening_balance)

    parsed = [
        (parse_entry_date(_field(entry, "date")), parse_entry_type(_field(entry, "type")),
         to_decimal(_field(entry, "amount")), entry)
        for entry in entries
    ]
    parsed.sort(key=lambda item: item[0])

    balance = opening
    purchases = ZERO
    payments = ZERO
    lines = []

    for entry_date, entry_type, amount, entry in parsed:
        if entry_type == LedgerEntryType.PURCHASE:
            balance += amount
            purchases += amount
        elif entry_type == LedgerEntryType.PAYMENT:
            balance -= amount
            payments += amount
        else:
            balance += amount
            if amount > 0:
                purchases += amount
            else:
                payments += -amount

        lines.append(LedgerLine(
            entry=entry,
            date=entry_date,
            type=entry_type,
            amount=amount,
            running_balance=balance,
        ))

    return LedgerStatement(
        opening_balance=opening,
        lines=tuple(lines),
        total_purchases=purchases,
        total_payments=payments,
        current_balance=balance,
    )


def filter_lines(statement: LedgerStatement, side: LedgerSide = LedgerSide.ALL) -> List[LedgerLine]:
    """
    Select credit or debit lines for display.

    Runs on a computed statement, so every retained line keeps the running
    balance it had in the full ledger.
    """
    side = LedgerSide(side)
    if side == LedgerSide.ALL:
        return list(statement.lines)
    return [line for line in statement.lines if line.side == side]
