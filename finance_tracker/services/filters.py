"""
Search, filter and sort for expense and income lists.

Filters combine with AND. Amount and date bounds are inclusive. Sorting is
stable, so records that compare equal stay in stored (insertion) order.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, List, Optional, Sequence

SEARCH_FIELDS = ("description", "note", "payment_mode")


class SortOrder(str, Enum):
    DATE_DESC = "date-desc"
    DATE_ASC = "date-asc"
    AMOUNT_DESC = "amount-desc"
    AMOUNT_ASC = "amount-asc"
    CATEGORY_ASC = "category-asc"


@dataclass(frozen=True)
class TransactionFilters:
    query: str = ""
    categories: Sequence[str] = ()
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    sort_by: Optional[SortOrder] = None


def matches_query(transaction: Any, query: str, category_key: str = "category") -> bool:
    """Case-insensitive substring match on description, category, note and payment mode."""
    needle = query.strip().lower()
    if not needle:
        return True
    for field in (category_key, *SEARCH_FIELDS):
        value = getattr(transaction, field, None)
        if value and needle in str(value).lower():
            return True
    return False


def sort_transactions(transactions: List[Any], order: SortOrder, category_key: str = "category") -> List[Any]:
    order = SortOrder(order)
    if order in (SortOrder.DATE_DESC, SortOrder.DATE_ASC):
        return sorted(transactions, key=lambda t: t.date, reverse=order == SortOrder.DATE_DESC)
    if order in (SortOrder.AMOUNT_DESC, SortOrder.AMOUNT_ASC):
        return sorted(transactions, key=lambda t: t.amount, reverse=order == SortOrder.AMOUNT_DESC)
    return sorted(transactions, key=lambda t: (getattr(t, category_key, None) or "").lower())


def filter_transactions(
    transactions: Sequence[Any],
    filters: TransactionFilters,
    category_key: str = "category",
) -> List[Any]:
    """
    Apply ``filters`` to expenses (``category_key="category"``) or income
    (``category_key="source"``).

    Without ``sort_by`` the stored order is kept.
    """
    selected = set(filters.categories)
    result = []
    for transaction in transactions:
        if not matches_query(transaction, filters.query, category_key):
            continue
        if selected and getattr(transaction, category_key, None) not in selected:
            continue
        if filters.min_amount is not None and transaction.amount < filters.min_amount:
            continue
        if filters.max_amount is not None and transaction.amount > filters.max_amount:
            continue
        if filters.start_date is not None and transaction.date < filters.start_date:
            continue
        if filters.end_date is not None and transaction.date > filters.end_date:
            continue
        result.append(transaction)

    if filters.sort_by is not None:
        result = sort_transactions(result, filters.sort_by, category_key)
    return result
