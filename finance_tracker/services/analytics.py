"""
Category and period aggregation over expenses, income and budgets.

Months are keyed by ``(year, month)`` of each transaction's calendar date.
Dates are naive; no time zone normalization happens here.
"""

import calendar
import math
from collections import defaultdict
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from finance_tracker.schemas.report import (
    BudgetDistribution,
    BudgetProgress,
    BudgetRecommendation,
    CategoryInsights,
    CategoryShare,
    CategoryTotal,
    CategoryTrend,
    DistributionSlice,
    GoalProgress,
    MonthStatistics,
    MonthSummary,
)

MonthKey = Tuple[int, int]

DEFAULT_CATEGORY = "Others"


def month_key(value: date) -> MonthKey:
    return value.year, value.month


def shift_month(key: MonthKey, offset: int) -> MonthKey:
    """Move ``offset`` months forward (or back when negative)."""
    index = key[0] * 12 + (key[1] - 1) + offset
    return index // 12, index % 12 + 1


def percentage_of(part: float, total: float) -> float:
    """Share of ``total`` in percent; 0 when the total is 0."""
    if not total:
        return 0.0
    return part / total * 100


def change_percentage(current: float, previous: float) -> float:
    """Growth from ``previous`` to ``current``; growth from nothing counts as 100%."""
    if previous > 0:
        return (current - previous) / previous * 100
    return 100.0 if current > 0 else 0.0


def total(transactions: Iterable[Any]) -> float:
    return sum(tx.amount for tx in transactions)


def in_month(transactions: Iterable[Any], key: MonthKey) -> List[Any]:
    return [tx for tx in transactions if month_key(tx.date) == key]


def totals_by_category(transactions: Iterable[Any], key: str = "category") -> Dict[str, float]:
    """
    Sum amounts per category, in first-seen order.

    Income rows group on ``source`` by passing ``key="source"``.
    """
    totals: Dict[str, float] = {}
    for tx in transactions:
        category = getattr(tx, key, None) or DEFAULT_CATEGORY
        totals[category] = totals.get(category, 0.0) + tx.amount
    return totals


def category_breakdown(transactions: Sequence[Any], key: str = "category") -> List[CategoryTotal]:
    """Category totals with their share of the overall total, largest first."""
    totals = totals_by_category(transactions, key)
    overall = sum(totals.values())
    rows = [
        CategoryTotal(category=category, amount=amount, percentage=percentage_of(amount, overall))
        for category, amount in totals.items()
    ]
    return sorted(rows, key=lambda row: row.amount, reverse=True)


def group_by_month(transactions: Iterable[Any]) -> Dict[MonthKey, List[Any]]:
    groups: Dict[MonthKey, List[Any]] = defaultdict(list)
    for tx in transactions:
        groups[month_key(tx.date)].append(tx)
    return dict(groups)


def monthly_summary(expenses: Sequence[Any], income: Sequence[Any]) -> List[MonthSummary]:
    """Income, expenses and savings per month, newest month first."""
    expense_groups = group_by_month(expenses)
    income_groups = group_by_month(income)

    summaries = []
    for key in sorted(set(expense_groups) | set(income_groups), reverse=True):
        spent = total(expense_groups.get(key, []))
        earned = total(income_groups.get(key, []))
        summaries.append(MonthSummary(
            year=key[0],
            month=key[1],
            income=earned,
            expenses=spent,
            savings=earned - spent,
        ))
    return summaries


def month_statistics(expenses: Sequence[Any], income: Sequence[Any], today: date) -> MonthStatistics:
    key = month_key(today)
    total_expenses = total(in_month(expenses, key))
    total_income = total(in_month(income, key))
    days_passed = today.day

    return MonthStatistics(
        year=key[0],
        month=key[1],
        total_expenses=total_expenses,
        total_income=total_income,
        net_savings=total_income - total_expenses,
        days_in_month=calendar.monthrange(*key)[1],
        days_passed=days_passed,
        avg_daily_spending=total_expenses / days_passed if days_passed > 0 else 0.0,
        avg_daily_income=total_income / days_passed if days_passed > 0 else 0.0,
        expense_count=len(expenses),
        income_count=len(income),
    )


def budget_progress(budgets: Iterable[Any], expenses: Sequence[Any], today: date) -> List[BudgetProgress]:
    """How much of each budget this month's spending in its category has used."""
    spending = totals_by_category(in_month(expenses, month_key(today)))

    progress = []
    for budget in budgets:
        spent = spending.get(budget.category, 0.0)
        amount = budget.amount or 0.0
        progress.append(BudgetProgress(
            budget_id=budget.id,
            category=budget.category,
            period=budget.period,
            amount=amount,
            spent=spent,
            remaining=amount - spent,
            percentage=min(percentage_of(spent, amount), 100.0),
            is_over_budget=spent > amount,
        ))
    return progress


def budget_distribution(budgets: Sequence[Any], monthly_income: float) -> Optional[BudgetDistribution]:
    """Split monthly income across budgets; None without income."""
    if monthly_income <= 0:
        return None

    total_budgeted = sum(budget.amount or 0.0 for budget in budgets)
    remaining = monthly_income - total_budgeted

    data = [
        DistributionSlice(name=budget.category, value=budget.amount)
        for budget in budgets
        if budget.amount and budget.amount > 0
    ]
    if remaining > 0:
        data.append(DistributionSlice(name="Remaining", value=remaining))

    return BudgetDistribution(
        data=data,
        total=monthly_income,
        total_budgeted=total_budgeted,
        remaining=remaining,
    )


def category_insights(expenses: Sequence[Any], today: date) -> Optional[CategoryInsights]:
    """Compare this month's category spending with last month's."""
    if not expenses:
        return None

    current_key = month_key(today)
    current_month = in_month(expenses, current_key)
    last_month = in_month(expenses, shift_month(current_key, -1))

    current = totals_by_category(current_month)
    last = totals_by_category(last_month)
    total_current = total(current_month)
    total_last = total(last_month)

    most_spent = None
    if current:
        category, amount = max(current.items(), key=lambda item: item[1])
        most_spent = CategoryShare(
            category=category,
            amount=amount,
            percentage=percentage_of(amount, total_current),
        )

    trends = []
    for category in dict.fromkeys([*current, *last]):
        now = current.get(category, 0.0)
        before = last.get(category, 0.0)
        if now <= 0:
            continue
        trends.append(CategoryTrend(
            category=category,
            current=now,
            last=before,
            change=now - before,
            change_percent=change_percentage(now, before),
        ))

    fastest = max(trends, key=lambda trend: trend.change_percent, default=None)
    top_trends = sorted(trends, key=lambda trend: abs(trend.change_percent), reverse=True)[:5]

    return CategoryInsights(
        most_spent=most_spent,
        fastest_growing=fastest,
        trends=top_trends,
        total_change=total_current - total_last,
        total_change_percent=change_percentage(total_current, total_last),
    )


def with_buffer(value: float) -> int:
    """Round ``value`` plus 10% up to a whole number, ignoring float noise."""
    return math.ceil(round(value * 1.1, 2))


def budget_recommendations(
    expenses: Sequence[Any],
    income: Sequence[Any],
    budgets: Iterable[Any],
    today: date,
) -> List[BudgetRecommendation]:
    """
    Suggest monthly budgets for categories that have none.

    Uses the average over the current and two previous months with a 10%
    buffer, highest average first.
    """
    current_key = month_key(today)
    window = {shift_month(current_key, -offset) for offset in range(3)}
    recent = [tx for tx in expenses if month_key(tx.date) in window]
    if not recent:
        return []

    spending: Dict[str, List[float]] = {}
    for tx in recent:
        spending.setdefault(tx.category or DEFAULT_CATEGORY, []).append(tx.amount)

    monthly_income = total(in_month(income, current_key))
    budgeted = {budget.category for budget in budgets if budget.period == "monthly"}

    recommendations = []
    for category, amounts in spending.items():
        if category in budgeted:
            continue

        avg_monthly = sum(amounts) / 3
        share = percentage_of(avg_monthly, monthly_income)

        alert = alert_message = None
        if share > 50:
            alert, alert_message = "critical", "Very high spending - urgent review needed"
        elif share > 30:
            alert, alert_message = "warning", "High spending - consider reducing"
        elif share < 5 and avg_monthly > 1000:
            alert, alert_message = "info", "Low percentage but significant amount"

        use_percentage = monthly_income > 0 and 0 < share <= 100
        recommendations.append(BudgetRecommendation(
            category=category,
            avg_spending=avg_monthly,
            months_data=len(amounts),
            suggested_amount=with_buffer(avg_monthly),
            suggested_percentage=with_buffer(share) if share > 0 else None,
            budget_type="percentage" if use_percentage else "fixed",
            alert=alert,
            alert_message=alert_message,
        ))

    return sorted(recommendations, key=lambda rec: rec.avg_spending, reverse=True)


def savings_goal_progress(goal: Any, today: date) -> GoalProgress:
    days_remaining = None
    if goal.target_date is not None:
        days_remaining = (goal.target_date - today).days

    return GoalProgress(
        goal_id=goal.id,
        name=goal.name,
        percentage=min(percentage_of(goal.current_amount, goal.target_amount), 100.0),
        is_reached=goal.current_amount >= goal.target_amount,
        remaining_amount=max(goal.target_amount - goal.current_amount, 0.0),
        days_remaining=days_remaining,
    )
