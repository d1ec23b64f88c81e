"""
Naive linear spending forecast.

The next months are projected from a constant per-month delta between the
first and last non-empty trailing months:

    growth_rate = (last - first) / (n - 1)
    forecast_i  = max(0, last + growth_rate * i)

No seasonality or regression.
"""

from datetime import date
from typing import Any, List, Sequence, Tuple

from finance_tracker.schemas.report import ForecastPoint, SpendingForecast
from finance_tracker.services.analytics import MonthKey, group_by_month, month_key, shift_month, total

HISTORY_MONTHS = 6
FORECAST_MONTHS = 3


def trailing_monthly_totals(
    expenses: Sequence[Any],
    today: date,
    months: int = HISTORY_MONTHS,
) -> List[Tuple[MonthKey, float]]:
    """Expense totals for the last ``months`` months, oldest first, current month included."""
    groups = group_by_month(expenses)
    current = month_key(today)
    keys = [shift_month(current, -offset) for offset in range(months - 1, -1, -1)]
    return [(key, total(groups.get(key, []))) for key in keys]


def project(values: Sequence[float], months: int = FORECAST_MONTHS) -> List[float]:
    """
    Extend ``values`` by ``months`` points along the first-to-last slope.

    Returns an empty list when fewer than two values are given.
    """
    n = len(values)
    if n < 2:
        return []
    growth_rate = (values[-1] - values[0]) / (n - 1)
    return [max(0.0, values[-1] + growth_rate * i) for i in range(1, months + 1)]


def spending_forecast(expenses: Sequence[Any], today: date) -> SpendingForecast:
    history = trailing_monthly_totals(expenses, today)
    points = [ForecastPoint(year=key[0], month=key[1], actual=amount) for key, amount in history]

    # Empty months carry no signal.
    values = [amount for _, amount in history if amount > 0]
    forecast = project(values)
    if not forecast:
        return SpendingForecast(months=points, has_forecast=False)

    last_key = month_key(today)
    for i, amount in enumerate(forecast, start=1):
        year, month = shift_month(last_key, i)
        points.append(ForecastPoint(year=year, month=month, forecast=amount))

    avg = sum(values) / len(values)
    growth_rate = (values[-1] - values[0]) / (len(values) - 1)

    return SpendingForecast(
        months=points,
        has_forecast=True,
        next_month_projection=forecast[0],
        yearly_projection=avg * 12,
        avg_monthly=avg,
        growth_rate=growth_rate,
        growth_percent=growth_rate / values[-1] * 100,
    )
