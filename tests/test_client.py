"""Tests for the HTTP client."""
import json

import httpx
import pytest

from finance_tracker.client import (
    ApiError,
    ArrayResult,
    ClientSession,
    FinanceTrackerClient,
    PageResult,
    parse_list,
)


class TestParseList:

    def test_bare_array(self):
        result = parse_list([{"id": 1}, {"id": 2}])

        assert isinstance(result, ArrayResult)
        assert result.kind == "array"
        assert result.total == 2

    def test_page_with_items(self):
        result = parse_list({"items": [{"id": 1}], "total": 40, "page": 2, "size": 1})

        assert isinstance(result, PageResult)
        assert result.kind == "page"
        assert result.items == [{"id": 1}]
        assert (result.total, result.page, result.size) == (40, 2, 1)

    def test_page_with_content(self):
        result = parse_list({"content": [{"id": 1}], "totalElements": 9})

        assert result.kind == "page"
        assert result.total == 9

    def test_page_total_defaults_to_item_count(self):
        assert parse_list({"items": [{"id": 1}, {"id": 2}]}).total == 2

    @pytest.mark.parametrize("payload", [None, {"detail": "nope"}, "text", {"items": "x"}])
    def test_unexpected_shapes(self, payload):
        with pytest.raises(ApiError):
            parse_list(payload)


class FakeApi:
    """Records requests and answers from a route table."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes[(request.method, request.url.path)]
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)


def make_client(routes):
    api = FakeApi(routes)
    session = ClientSession("http://test/api", transport=httpx.MockTransport(api))
    return FinanceTrackerClient(session), api


def test_login_sets_token_for_later_requests():
    client, api = make_client({
        ("POST", "/api/auth/login"): (200, {
            "access_token": "tok-123",
            "token_type": "bearer",
            "user": {"id": 1, "username": "jo", "email": "jo@example.com"},
        }),
        ("GET", "/api/expenses"): (200, [{"id": 1, "amount": 5}]),
    })

    user = client.login("jo@example.com", "secret")
    expenses = client.expenses.list()

    assert user["id"] == 1
    assert client.session.is_authenticated
    assert "authorization" not in api.requests[0].headers
    assert json.loads(api.requests[0].content) == {"email": "jo@example.com", "password": "secret"}
    assert api.requests[1].headers["authorization"] == "Bearer tok-123"
    assert expenses.kind == "array"
    assert expenses.items == [{"id": 1, "amount": 5}]


def test_logout_clears_token():
    client, api = make_client({("GET", "/api/notes"): (200, [])})
    client.session.token = "tok"

    client.logout()
    client.notes.list()

    assert not client.session.is_authenticated
    assert "authorization" not in api.requests[0].headers


def test_error_detail_becomes_api_error():
    client, _ = make_client({("GET", "/api/expenses/9"): (404, {"detail": "Expense not found"})})

    with pytest.raises(ApiError) as exc_info:
        client.expenses.get(9)

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Expense not found"


def test_structured_error_detail_uses_message():
    client, _ = make_client({("POST", "/api/tasks"): (409, {"detail": {
        "error": "Time slot conflict",
        "message": 'Time slot conflicts with existing task "Gym" (09:00 - 10:00)',
    }})})

    with pytest.raises(ApiError) as exc_info:
        client.tasks.create({"title": "Run"})

    assert exc_info.value.status_code == 409
    assert "Gym" in exc_info.value.message


def test_delete_returns_none():
    client, api = make_client({("DELETE", "/api/parties/3"): (204, None)})

    assert client.parties.delete(3) is None
    assert api.requests[0].method == "DELETE"


def test_paged_list_response():
    client, _ = make_client({("GET", "/api/income"): (200, {"items": [{"id": 7}], "total": 12, "page": 1, "size": 1})})

    result = client.income.list(page=1)

    assert isinstance(result, PageResult)
    assert result.total == 12


def test_ledger_and_report_paths():
    client, api = make_client({
        ("GET", "/api/ledger/parties/4/entries"): (200, {"entries": []}),
        ("GET", "/api/parties/search"): (200, []),
        ("GET", "/api/reports/budgets"): (200, {"progress": []}),
        ("POST", "/api/recurring/2/generate"): (201, {"message": "ok"}),
    })

    client.ledger.statement(4, side="debit")
    client.parties.search("acme")
    client.reports.budgets(monthly_income=2500)
    client.recurring.generate(2)

    assert api.requests[0].url.params["side"] == "debit"
    assert api.requests[1].url.params["q"] == "acme"
    assert api.requests[2].url.params["monthlyIncome"] == "2500"
    assert api.requests[3].method == "POST"


def test_close_resets_session():
    with FinanceTrackerClient(ClientSession("http://test/api", token="tok")) as client:
        session = client.session

    assert session.token is None
