from fastapi import APIRouter, Depends

from finance_tracker.api.v1.endpoints import auth, budgets, ledger, parties, recurring, reports, tasks
from finance_tracker.api.v1.endpoints.records import (
    credits_router,
    expenses_router,
    income_router,
    notes_router,
    savings_goals_router,
    templates_router,
)
from finance_tracker.core.auth import get_current_user

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])

protected = [Depends(get_current_user)]

api_router.include_router(expenses_router, prefix="/expenses", tags=["expenses"], dependencies=protected)
api_router.include_router(income_router, prefix="/income", tags=["income"], dependencies=protected)
api_router.include_router(credits_router, prefix="/credits", tags=["credits"], dependencies=protected)
api_router.include_router(notes_router, prefix="/notes", tags=["notes"], dependencies=protected)
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"], dependencies=protected)
api_router.include_router(budgets.router, prefix="/budgets", tags=["budgets"], dependencies=protected)
api_router.include_router(recurring.router, prefix="/recurring", tags=["recurring"], dependencies=protected)
api_router.include_router(templates_router, prefix="/templates", tags=["templates"], dependencies=protected)
api_router.include_router(savings_goals_router, prefix="/savings-goals", tags=["savings goals"], dependencies=protected)
api_router.include_router(parties.router, prefix="/parties", tags=["parties"], dependencies=protected)
api_router.include_router(ledger.router, prefix="/ledger", tags=["ledger"], dependencies=protected)
api_router.include_router(reports.router, prefix="/reports", tags=["reports"], dependencies=protected)
