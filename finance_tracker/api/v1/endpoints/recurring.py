from datetime import date
from typing import Union

from fastapi import APIRouter, Depends, HTTPException, status

from finance_tracker.api.v1.endpoints.crud import build_crud_router
from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.db.session import get_db
from finance_tracker.models.base import CamelModel
from finance_tracker.models.recurring import RecurringItem, RecurringItemCreate
from finance_tracker.models.transaction import Expense, Income
from finance_tracker.repositories.records import RecurringItemRepository
from finance_tracker.services.recurring import RecurringService
from finance_tracker.utils.validation import InactiveRecurringItem


class GeneratedEntryResponse(CamelModel):
    message: str
    recurring_item: RecurringItem
    entry: Union[Expense, Income]


router = build_crud_router(RecurringItemRepository, RecurringItemCreate, RecurringItem, "Recurring item")


@router.post("/{record_id}/generate", response_model=GeneratedEntryResponse, status_code=status.HTTP_201_CREATED)
async def generate_entry(record_id: int, db: JsonDatabase = Depends(get_db)):
    """Create today's expense or income from a recurring item"""
    item = RecurringItemRepository(db).get(record_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recurring item not found")

    try:
        item, entry = RecurringService.generate_entry(db, item, date.today())
    except InactiveRecurringItem as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return GeneratedEntryResponse(
        message="Entry generated successfully",
        recurring_item=item,
        entry=entry,
    )
