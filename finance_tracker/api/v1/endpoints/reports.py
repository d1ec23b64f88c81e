from datetime import date
from enum import Enum
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.db.session import get_db
from finance_tracker.models.base import CamelModel
from finance_tracker.repositories.budget_repo import BudgetRepository
from finance_tracker.repositories.records import ExpenseRepository, IncomeRepository, SavingsGoalRepository
from finance_tracker.schemas.report import (
    BudgetDistribution,
    BudgetProgress,
    BudgetRecommendation,
    CategoryInsights,
    CategoryTotal,
    GoalProgress,
    MonthStatistics,
    MonthSummary,
    SpendingForecast,
)
from finance_tracker.services import analytics
from finance_tracker.services.forecast import spending_forecast

router = APIRouter()


class TransactionKind(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"


class BudgetOverview(CamelModel):
    monthly_income: float
    progress: List[BudgetProgress]
    distribution: Optional[BudgetDistribution] = None


def today() -> date:
    return date.today()


@router.get("/categories", response_model=List[CategoryTotal])
async def category_totals(
    kind: TransactionKind = Query(default=TransactionKind.EXPENSE),
    db: JsonDatabase = Depends(get_db),
):
    """Totals per category (per source for income), largest first"""
    if kind == TransactionKind.INCOME:
        return analytics.category_breakdown(IncomeRepository(db).list_all(), key="source")
    return analytics.category_breakdown(ExpenseRepository(db).list_all())


@router.get("/monthly", response_model=List[MonthSummary])
async def monthly_summary(db: JsonDatabase = Depends(get_db)):
    """Income, expenses and savings per month, newest first"""
    return analytics.monthly_summary(ExpenseRepository(db).list_all(), IncomeRepository(db).list_all())


@router.get("/statistics", response_model=MonthStatistics)
async def month_statistics(db: JsonDatabase = Depends(get_db), current: date = Depends(today)):
    """Totals and daily averages for the current month"""
    return analytics.month_statistics(
        ExpenseRepository(db).list_all(),
        IncomeRepository(db).list_all(),
        current,
    )


@router.get("/insights", response_model=Optional[CategoryInsights])
async def category_insights(db: JsonDatabase = Depends(get_db), current: date = Depends(today)):
    """This month's category spending compared with last month"""
    return analytics.category_insights(ExpenseRepository(db).list_all(), current)


@router.get("/forecast", response_model=SpendingForecast)
async def forecast(db: JsonDatabase = Depends(get_db), current: date = Depends(today)):
    """Linear projection of spending for the next three months"""
    return spending_forecast(ExpenseRepository(db).list_all(), current)


@router.get("/budgets", response_model=BudgetOverview)
async def budget_overview(
    monthly_income: Optional[float] = Query(default=None, alias="monthlyIncome", ge=0),
    db: JsonDatabase = Depends(get_db),
    current: date = Depends(today),
):
    """
    Budget usage this month and the split of monthly income across budgets.

    Monthly income defaults to the income recorded this month.
    """
    budgets = BudgetRepository(db).list_all()
    if monthly_income is None:
        monthly_income = analytics.total(
            analytics.in_month(IncomeRepository(db).list_all(), analytics.month_key(current))
        )
    return BudgetOverview(
        monthly_income=monthly_income,
        progress=analytics.budget_progress(budgets, ExpenseRepository(db).list_all(), current),
        distribution=analytics.budget_distribution(budgets, monthly_income),
    )


@router.get("/recommendations", response_model=List[BudgetRecommendation])
async def budget_recommendations(db: JsonDatabase = Depends(get_db), current: date = Depends(today)):
    """Suggested budgets for categories that have none"""
    return analytics.budget_recommendations(
        ExpenseRepository(db).list_all(),
        IncomeRepository(db).list_all(),
        BudgetRepository(db).list_all(),
        current,
    )


@router.get("/savings-goals", response_model=List[GoalProgress])
async def savings_goal_progress(db: JsonDatabase = Depends(get_db), current: date = Depends(today)):
    """Progress towards each savings goal"""
    return [
        analytics.savings_goal_progress(goal, current)
        for goal in SavingsGoalRepository(db).list_all()
    ]
