"""Tests for category and month aggregation."""
from datetime import date
from types import SimpleNamespace

import pytest

from finance_tracker.models.budget import Budget, SavingsGoal
from finance_tracker.models.transaction import Expense, Income
from finance_tracker.services import analytics

TODAY = date(2024, 3, 15)


def expense(amount, category, on, expense_id=1):
    return Expense(id=expense_id, amount=amount, description=category, category=category, date=on)


def income(amount, on, source="Salary"):
    return Income(id=1, amount=amount, description=source, source=source, date=on)


def budget(category, amount, budget_id=1, period="monthly"):
    return Budget(id=budget_id, category=category, budget_type="fixed", period=period, amount=amount)


class TestHelpers:

    def test_percentage_of_zero_total(self):
        assert analytics.percentage_of(50, 0) == 0
        assert analytics.percentage_of(0, 0) == 0

    def test_percentage_of(self):
        assert analytics.percentage_of(25, 200) == 12.5

    def test_change_percentage(self):
        assert analytics.change_percentage(150, 100) == 50
        assert analytics.change_percentage(50, 0) == 100
        assert analytics.change_percentage(0, 0) == 0

    def test_shift_month_across_years(self):
        assert analytics.shift_month((2024, 1), -1) == (2023, 12)
        assert analytics.shift_month((2024, 11), 3) == (2025, 2)
        assert analytics.shift_month((2024, 5), 0) == (2024, 5)

    def test_with_buffer(self):
        assert analytics.with_buffer(180) == 198
        assert analytics.with_buffer(95) == 105
        assert analytics.with_buffer(0.5) == 1


def test_totals_by_category_defaults_to_others():
    rows = [
        SimpleNamespace(amount=10, category="Food"),
        SimpleNamespace(amount=5, category=None),
        SimpleNamespace(amount=7, category="Food"),
    ]

    assert analytics.totals_by_category(rows) == {"Food": 17, "Others": 5}


def test_category_breakdown_sorted_with_shares():
    rows = analytics.category_breakdown([
        expense(25, "Travel", TODAY),
        expense(75, "Food", TODAY),
    ])

    assert [(r.category, r.amount, r.percentage) for r in rows] == [
        ("Food", 75, 75.0),
        ("Travel", 25, 25.0),
    ]


def test_income_breakdown_by_source():
    rows = analytics.category_breakdown([income(100, TODAY, "Salary"), income(50, TODAY, "Freelance")], key="source")

    assert [r.category for r in rows] == ["Salary", "Freelance"]


def test_monthly_summary_newest_first():
    summary = analytics.monthly_summary(
        [expense(100, "Food", date(2024, 1, 5)), expense(40, "Food", date(2024, 3, 2))],
        [income(1000, date(2024, 1, 1)), income(500, date(2024, 2, 1))],
    )

    assert [(s.year, s.month) for s in summary] == [(2024, 3), (2024, 2), (2024, 1)]
    assert summary[0].savings == -40
    assert summary[2].savings == 900


def test_month_statistics():
    stats = analytics.month_statistics(
        [expense(100, "Food", date(2024, 3, 1)), expense(50, "Food", date(2024, 2, 20))],
        [income(1500, date(2024, 3, 1))],
        date(2024, 3, 10),
    )

    assert stats.total_expenses == 100
    assert stats.total_income == 1500
    assert stats.net_savings == 1400
    assert stats.days_in_month == 31
    assert stats.days_passed == 10
    assert stats.avg_daily_spending == 10
    assert stats.avg_daily_income == 150
    assert stats.expense_count == 2


class TestBudgets:

    def test_progress_caps_percentage(self):
        progress = analytics.budget_progress(
            [budget("Food", 200)],
            [
                expense(150, "Food", TODAY),
                expense(100, "Food", date(2024, 3, 1)),
                expense(999, "Food", date(2024, 2, 1)),
            ],
            TODAY,
        )[0]

        assert progress.spent == 250
        assert progress.remaining == -50
        assert progress.percentage == 100
        assert progress.is_over_budget is True

    def test_progress_under_budget(self):
        progress = analytics.budget_progress([budget("Food", 200)], [expense(50, "Food", TODAY)], TODAY)[0]

        assert progress.percentage == 25
        assert progress.is_over_budget is False

    def test_distribution_without_income(self):
        assert analytics.budget_distribution([budget("Food", 200)], 0) is None

    def test_distribution_with_remaining_slice(self):
        distribution = analytics.budget_distribution(
            [budget("Food", 300), budget("Rent", 200, budget_id=2)], 1000
        )

        assert [(s.name, s.value) for s in distribution.data] == [
            ("Food", 300), ("Rent", 200), ("Remaining", 500),
        ]
        assert distribution.total_budgeted == 500

    def test_distribution_over_allocated(self):
        distribution = analytics.budget_distribution([budget("Rent", 1200)], 1000)

        assert [s.name for s in distribution.data] == ["Rent"]
        assert distribution.remaining == -200


class TestCategoryInsights:

    def test_no_expenses(self):
        assert analytics.category_insights([], TODAY) is None

    def test_compares_with_last_month(self):
        insights = analytics.category_insights([
            expense(300, "Food", TODAY),
            expense(100, "Travel", TODAY),
            expense(200, "Food", date(2024, 2, 10)),
        ], TODAY)

        assert insights.most_spent.category == "Food"
        assert insights.most_spent.percentage == 75
        assert insights.fastest_growing.category == "Travel"
        assert insights.fastest_growing.change_percent == 100
        assert [t.category for t in insights.trends] == ["Travel", "Food"]
        assert insights.total_change == 200
        assert insights.total_change_percent == 100

    def test_only_last_month_spending(self):
        insights = analytics.category_insights([expense(200, "Food", date(2024, 2, 10))], TODAY)

        assert insights.most_spent is None
        assert insights.trends == []
        assert insights.total_change_percent == pytest.approx(-100)


class TestBudgetRecommendations:

    def test_three_month_average_with_buffer(self):
        recs = analytics.budget_recommendations(
            [
                expense(100, "Food", date(2024, 1, 10)),
                expense(90, "Food", date(2024, 2, 10)),
                expense(95, "Food", date(2024, 3, 10)),
                expense(5000, "Food", date(2023, 12, 10)),
            ],
            [income(1000, date(2024, 3, 1))],
            [],
            TODAY,
        )

        assert len(recs) == 1
        rec = recs[0]
        assert rec.avg_spending == pytest.approx(95)
        assert rec.months_data == 3
        assert rec.suggested_amount == 105
        assert rec.suggested_percentage == 11
        assert rec.budget_type == "percentage"
        assert rec.alert is None

    def test_alert_levels(self):
        recs = analytics.budget_recommendations(
            [
                expense(1800, "Rent", date(2024, 3, 1)),
                expense(1200, "Travel", date(2024, 3, 1)),
                expense(30, "Snacks", date(2024, 3, 1)),
            ],
            [income(1000, date(2024, 3, 1))],
            [],
            TODAY,
        )

        alerts = {rec.category: rec.alert for rec in recs}
        assert alerts == {"Rent": "critical", "Travel": "warning", "Snacks": None}
        assert [rec.category for rec in recs] == ["Rent", "Travel", "Snacks"]

    @pytest.mark.parametrize("spent,alert", [(1500, "warning"), (1503, "critical")])
    def test_critical_above_half_of_income(self, spent, alert):
        # Checked before the 30% warning, so a share above 50% is critical.
        recs = analytics.budget_recommendations(
            [expense(spent, "Rent", date(2024, 3, 1))],
            [income(1000, date(2024, 3, 1))],
            [],
            TODAY,
        )

        assert recs[0].alert == alert
        if alert == "critical":
            assert recs[0].alert_message == "Very high spending - urgent review needed"

    def test_info_alert_for_large_low_share(self):
        recs = analytics.budget_recommendations(
            [expense(9000, "Car", date(2024, 3, 1))],
            [income(100000, date(2024, 3, 1))],
            [],
            TODAY,
        )

        assert recs[0].alert == "info"

    def test_skips_budgeted_categories(self):
        recs = analytics.budget_recommendations(
            [expense(300, "Food", TODAY), expense(300, "Fun", TODAY)],
            [],
            [budget("Food", 500)],
            TODAY,
        )

        assert [rec.category for rec in recs] == ["Fun"]
        assert recs[0].budget_type == "fixed"
        assert recs[0].suggested_percentage is None

    def test_no_recent_spending(self):
        assert analytics.budget_recommendations([expense(300, "Food", date(2023, 1, 1))], [], [], TODAY) == []


class TestSavingsGoalProgress:

    def test_partial(self):
        goal = SavingsGoal(id=1, name="Laptop", target_amount=1000, current_amount=250, target_date=date(2024, 12, 31))

        progress = analytics.savings_goal_progress(goal, date(2024, 12, 1))

        assert progress.percentage == 25
        assert progress.is_reached is False
        assert progress.remaining_amount == 750
        assert progress.days_remaining == 30

    def test_reached_is_capped(self):
        goal = SavingsGoal(id=1, name="Trip", target_amount=500, current_amount=800)

        progress = analytics.savings_goal_progress(goal, TODAY)

        assert progress.percentage == 100
        assert progress.is_reached is True
        assert progress.remaining_amount == 0
        assert progress.days_remaining is None
