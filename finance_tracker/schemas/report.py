from typing import List, Optional

from finance_tracker.models.base import CamelModel


class CategoryTotal(CamelModel):
    category: str
    amount: float
    percentage: float


class MonthSummary(CamelModel):
    year: int
    month: int
    income: float
    expenses: float
    savings: float


class MonthStatistics(CamelModel):
    year: int
    month: int
    total_expenses: float
    total_income: float
    net_savings: float
    days_in_month: int
    days_passed: int
    avg_daily_spending: float
    avg_daily_income: float
    expense_count: int
    income_count: int


class BudgetProgress(CamelModel):
    budget_id: int
    category: str
    period: str
    amount: float
    spent: float
    remaining: float
    percentage: float
    is_over_budget: bool


class DistributionSlice(CamelModel):
    name: str
    value: float


class BudgetDistribution(CamelModel):
    data: List[DistributionSlice]
    total: float
    total_budgeted: float
    remaining: float


class CategoryShare(CamelModel):
    category: str
    amount: float
    percentage: float


class CategoryTrend(CamelModel):
    category: str
    current: float
    last: float
    change: float
    change_percent: float


class CategoryInsights(CamelModel):
    most_spent: Optional[CategoryShare] = None
    fastest_growing: Optional[CategoryTrend] = None
    trends: List[CategoryTrend]
    total_change: float
    total_change_percent: float


class BudgetRecommendation(CamelModel):
    category: str
    avg_spending: float
    months_data: int
    suggested_amount: int
    suggested_percentage: Optional[int] = None
    budget_type: str
    alert: Optional[str] = None
    alert_message: Optional[str] = None


class GoalProgress(CamelModel):
    goal_id: int
    name: str
    percentage: float
    is_reached: bool
    remaining_amount: float
    days_remaining: Optional[int] = None


class ForecastPoint(CamelModel):
    year: int
    month: int
    actual: Optional[float] = None
    forecast: Optional[float] = None


class SpendingForecast(CamelModel):
    months: List[ForecastPoint]
    has_forecast: bool
    next_month_projection: float = 0
    yearly_projection: float = 0
    avg_monthly: float = 0
    growth_rate: float = 0
    growth_percent: float = 0
