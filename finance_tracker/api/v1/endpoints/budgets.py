from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.db.session import get_db
from finance_tracker.models.budget import Budget, BudgetCreate
from finance_tracker.repositories.budget_repo import BudgetRepository
from finance_tracker.utils.validation import DuplicateBudget

router = APIRouter()


@router.get("", response_model=List[Budget])
async def list_budgets(db: JsonDatabase = Depends(get_db)):
    """List all budgets"""
    return BudgetRepository(db).list_all()


@router.get("/{budget_id}", response_model=Budget)
async def get_budget(budget_id: int, db: JsonDatabase = Depends(get_db)):
    """Get a specific budget"""
    budget = BudgetRepository(db).get(budget_id)
    if budget is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Budget not found")
    return budget


@router.post("", response_model=Budget, status_code=status.HTTP_201_CREATED)
async def create_budget(payload: BudgetCreate, db: JsonDatabase = Depends(get_db)):
    """Create a fixed or percentage-of-income budget"""
    try:
        return BudgetRepository(db).create(payload)
    except DuplicateBudget as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.put("/{budget_id}", response_model=Budget)
async def replace_budget(budget_id: int, payload: BudgetCreate, db: JsonDatabase = Depends(get_db)):
    """Replace a budget"""
    try:
        budget = BudgetRepository(db).update(budget_id, payload)
    except DuplicateBudget as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if budget is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Budget not found")
    return budget


@router.delete("/{budget_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_budget(budget_id: int, db: JsonDatabase = Depends(get_db)):
    """Delete a budget"""
    if not BudgetRepository(db).delete(budget_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Budget not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
