from datetime import date

import pytest
import pytest_asyncio

from finance_tracker.api.v1.endpoints import reports
from finance_tracker.main import app


@pytest_asyncio.fixture
async def seeded(client, auth_headers):
    """Three months of spending and one month of income, 'today' pinned to 2024-03-15."""
    app.dependency_overrides[reports.today] = lambda: date(2024, 3, 15)

    expenses = [
        (100, "Food", "2024-01-10"),
        (200, "Food", "2024-02-10"),
        (240, "Food", "2024-03-05"),
        (60, "Travel", "2024-03-06"),
    ]
    for amount, category, on in expenses:
        response = await client.post(
            "/api/expenses",
            json={"amount": amount, "description": category, "category": category, "date": on},
            headers=auth_headers,
        )
        assert response.status_code == 201
    await client.post(
        "/api/income",
        json={"amount": 1500, "description": "Salary", "source": "Employer", "date": "2024-03-01"},
        headers=auth_headers,
    )
    return client


@pytest.mark.asyncio
async def test_categories(seeded, auth_headers):
    response = await seeded.get("/api/reports/categories", headers=auth_headers)

    assert response.status_code == 200
    assert [(r["category"], r["amount"]) for r in response.json()] == [("Food", 540), ("Travel", 60)]


@pytest.mark.asyncio
async def test_income_categories(seeded, auth_headers):
    response = await seeded.get("/api/reports/categories", params={"kind": "income"}, headers=auth_headers)

    assert response.json() == [{"category": "Employer", "amount": 1500, "percentage": 100}]


@pytest.mark.asyncio
async def test_monthly(seeded, auth_headers):
    months = (await seeded.get("/api/reports/monthly", headers=auth_headers)).json()

    assert [(m["year"], m["month"]) for m in months] == [(2024, 3), (2024, 2), (2024, 1)]
    assert months[0] == {"year": 2024, "month": 3, "income": 1500, "expenses": 300, "savings": 1200}


@pytest.mark.asyncio
async def test_statistics(seeded, auth_headers):
    stats = (await seeded.get("/api/reports/statistics", headers=auth_headers)).json()

    assert stats["totalExpenses"] == 300
    assert stats["totalIncome"] == 1500
    assert stats["avgDailySpending"] == 20
    assert stats["daysPassed"] == 15


@pytest.mark.asyncio
async def test_insights(seeded, auth_headers):
    insights = (await seeded.get("/api/reports/insights", headers=auth_headers)).json()

    assert insights["mostSpent"]["category"] == "Food"
    assert insights["fastestGrowing"]["category"] == "Travel"
    assert insights["totalChange"] == 100


@pytest.mark.asyncio
async def test_insights_without_expenses(client, auth_headers):
    response = await client.get("/api/reports/insights", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
async def test_forecast(seeded, auth_headers):
    forecast = (await seeded.get("/api/reports/forecast", headers=auth_headers)).json()

    # Monthly totals 100, 200, 300
    assert forecast["hasForecast"] is True
    assert forecast["nextMonthProjection"] == 400
    assert forecast["yearlyProjection"] == 2400
    assert len(forecast["months"]) == 9


@pytest.mark.asyncio
async def test_budgets_overview(seeded, auth_headers):
    await seeded.post(
        "/api/budgets",
        json={"category": "Food", "budgetType": "fixed", "period": "monthly", "amount": 200},
        headers=auth_headers,
    )

    overview = (await seeded.get("/api/reports/budgets", headers=auth_headers)).json()

    assert overview["monthlyIncome"] == 1500
    progress = overview["progress"][0]
    assert progress["spent"] == 240
    assert progress["isOverBudget"] is True
    assert progress["percentage"] == 100
    assert [s["name"] for s in overview["distribution"]["data"]] == ["Food", "Remaining"]

    overview = (await seeded.get(
        "/api/reports/budgets", params={"monthlyIncome": 0}, headers=auth_headers
    )).json()
    assert overview["distribution"] is None


@pytest.mark.asyncio
async def test_recommendations(seeded, auth_headers):
    recs = (await seeded.get("/api/reports/recommendations", headers=auth_headers)).json()

    assert [r["category"] for r in recs] == ["Food", "Travel"]
    # 540 / 3 = 180 average, 12% of income
    assert recs[0]["avgSpending"] == 180
    assert recs[0]["suggestedAmount"] == 198
    assert recs[0]["budgetType"] == "percentage"


@pytest.mark.asyncio
async def test_savings_goal_progress(seeded, auth_headers):
    await seeded.post(
        "/api/savings-goals",
        json={"name": "Laptop", "targetAmount": 1000, "currentAmount": 400, "targetDate": "2024-03-25"},
        headers=auth_headers,
    )

    goals = (await seeded.get("/api/reports/savings-goals", headers=auth_headers)).json()

    assert goals == [{
        "goalId": 1,
        "name": "Laptop",
        "percentage": 40,
        "isReached": False,
        "remainingAmount": 600,
        "daysRemaining": 10,
    }]
