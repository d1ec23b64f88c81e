"""List / get / create / replace / delete routes shared by the plain collections."""

from datetime import date
from typing import List, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel

from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.db.session import get_db
from finance_tracker.repositories.base import JsonRepository
from finance_tracker.services.filters import SortOrder, TransactionFilters, filter_transactions


def transaction_filters(
    q: str = Query(default="", description="Search description, category, note and payment mode"),
    category: List[str] = Query(default=[], description="Repeat to match any of several categories"),
    min_amount: Optional[float] = Query(default=None, alias="minAmount"),
    max_amount: Optional[float] = Query(default=None, alias="maxAmount"),
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    sort_by: Optional[SortOrder] = Query(default=None, alias="sortBy"),
) -> TransactionFilters:
    return TransactionFilters(
        query=q,
        categories=tuple(category),
        min_amount=min_amount,
        max_amount=max_amount,
        start_date=start_date,
        end_date=end_date,
        sort_by=sort_by,
    )


def build_crud_router(
    repository: Type[JsonRepository],
    create_model: Type[BaseModel],
    response_model: Type[BaseModel],
    label: str,
    category_key: Optional[str] = None,
) -> APIRouter:
    """
    Routes for one collection; ``label`` names the record in error messages.

    With ``category_key`` the list route also takes the transaction search,
    filter and sort parameters, matching categories on that field.
    """
    router = APIRouter()
    not_found = f"{label} not found"

    def get_repo(db: JsonDatabase = Depends(get_db)) -> JsonRepository:
        return repository(db)

    if category_key is None:
        @router.get("", response_model=List[response_model])
        async def list_records(repo: JsonRepository = Depends(get_repo)):
            return repo.list_all()
    else:
        @router.get("", response_model=List[response_model])
        async def list_records(
            filters: TransactionFilters = Depends(transaction_filters),
            repo: JsonRepository = Depends(get_repo),
        ):
            return filter_transactions(repo.list_all(), filters, category_key)

    @router.get("/{record_id}", response_model=response_model)
    async def get_record(record_id: int, repo: JsonRepository = Depends(get_repo)):
        record = repo.get(record_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return record

    @router.post("", response_model=response_model, status_code=status.HTTP_201_CREATED)
    async def create_record(payload: create_model, repo: JsonRepository = Depends(get_repo)):
        return repo.create(payload)

    @router.put("/{record_id}", response_model=response_model)
    async def replace_record(
        record_id: int,
        payload: create_model,
        repo: JsonRepository = Depends(get_repo),
    ):
        record = repo.update(record_id, payload)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return record

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_record(record_id: int, repo: JsonRepository = Depends(get_repo)):
        if not repo.delete(record_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
