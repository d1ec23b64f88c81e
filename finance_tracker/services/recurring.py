from datetime import date
from typing import Tuple, Union

from finance_tracker.core.logging import get_logger
from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.models.recurring import RecurringItem, RecurringType
from finance_tracker.models.transaction import Expense, ExpenseCreate, Income, IncomeCreate
from finance_tracker.repositories.records import ExpenseRepository, IncomeRepository, RecurringItemRepository
from finance_tracker.utils.validation import InactiveRecurringItem

logger = get_logger(__name__)


class RecurringService:
    @staticmethod
    def generate_entry(
        db: JsonDatabase,
        item: RecurringItem,
        today: date,
    ) -> Tuple[RecurringItem, Union[Expense, Income]]:
        """
        Create today's expense or income from a recurring item.

        Marks the item with ``last_generated = today``.
        Raises InactiveRecurringItem if the item is switched off.
        """
        if not item.is_active:
            raise InactiveRecurringItem("Recurring item is not active")

        if item.type == RecurringType.EXPENSE:
            entry = ExpenseRepository(db).create(ExpenseCreate(
                amount=item.amount,
                description=item.description,
                category=item.category,
                date=today,
            ))
        else:
            entry = IncomeRepository(db).create(IncomeCreate(
                amount=item.amount,
                description=item.description,
                source=item.source,
                date=today,
            ))

        item.last_generated = today
        RecurringItemRepository(db).save(item)
        logger.info("Generated %s %s from recurring item %s", item.type.value, entry.id, item.id)
        return item, entry
