"""
HTTP client for the Finance Tracker API.

State lives on an explicit ``ClientSession`` (base URL and bearer token)
that the caller creates and closes; nothing is kept at module level.

List endpoints may answer with a bare JSON array or with a page object
(``{"items": [...], "total": n, "page": p, "size": s}``; ``content`` is
accepted in place of ``items``). ``parse_list`` resolves that once at the
boundary into ``ArrayResult`` or ``PageResult`` so callers match on the
``kind`` tag instead of probing the payload.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Union

import httpx

from finance_tracker.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080/api"


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


@dataclass(frozen=True)
class ArrayResult:
    items: List[Dict[str, Any]]
    kind: Literal["array"] = "array"

    @property
    def total(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class PageResult:
    items: List[Dict[str, Any]]
    total: int
    page: Optional[int] = None
    size: Optional[int] = None
    kind: Literal["page"] = "page"


ListResult = Union[ArrayResult, PageResult]


def parse_list(payload: Any) -> ListResult:
    """Resolve a list response into its tagged form."""
    if isinstance(payload, list):
        return ArrayResult(items=payload)
    if isinstance(payload, dict):
        key = "items" if "items" in payload else "content" if "content" in payload else None
        if key is not None and isinstance(payload[key], list):
            items = payload[key]
            return PageResult(
                items=items,
                total=payload.get("total", payload.get("totalElements", len(items))),
                page=payload.get("page"),
                size=payload.get("size"),
            )
    raise ApiError(200, f"Unexpected list response: {type(payload).__name__}")


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(data, dict):
        detail = data.get("detail", data.get("error", data.get("message")))
        if isinstance(detail, dict):
            return detail.get("message") or detail.get("error") or str(detail)
        if detail is not None:
            return str(detail)
    return str(data)


@dataclass
class ClientSession:
    """Base URL, bearer token and the underlying ``httpx.Client``."""

    base_url: str = DEFAULT_BASE_URL
    token: Optional[str] = None
    timeout: float = 30.0
    transport: Optional[httpx.BaseTransport] = None
    _http: Optional[httpx.Client] = field(default=None, init=False, repr=False)

    @property
    def http(self) -> httpx.Client:
        if self._http is None:
            self._http = httpx.Client(
                base_url=self.base_url.rstrip("/"),
                timeout=self.timeout,
                transport=self.transport,
            )
        return self._http

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def headers(self) -> Dict[str, str]:
        if self.token is None:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def request(self, method: str, path: str, **kwargs) -> Any:
        """Send a request and return the decoded body, ``None`` for 204."""
        response = self.http.request(method, path, headers=self.headers(), **kwargs)
        if response.is_error:
            message = _error_message(response)
            logger.info("%s %s failed: %s %s", method, path, response.status_code, message)
            raise ApiError(response.status_code, message)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def logout(self) -> None:
        self.token = None

    def close(self) -> None:
        self.logout()
        if self._http is not None:
            self._http.close()
            self._http = None


class Resource:
    """CRUD calls for one collection."""

    def __init__(self, session: ClientSession, path: str):
        self.session = session
        self.path = path

    def list(self, **params) -> ListResult:
        return parse_list(self.session.request("GET", self.path, params=params or None))

    def get(self, record_id: int) -> Dict[str, Any]:
        return self.session.request("GET", f"{self.path}/{record_id}")

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.session.request("POST", self.path, json=data)

    def update(self, record_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the record; ``data`` must be the full record."""
        return self.session.request("PUT", f"{self.path}/{record_id}", json=data)

    def delete(self, record_id: int) -> None:
        self.session.request("DELETE", f"{self.path}/{record_id}")


class RecurringResource(Resource):
    def generate(self, record_id: int) -> Dict[str, Any]:
        return self.session.request("POST", f"{self.path}/{record_id}/generate")


class PartyResource(Resource):
    def search(self, query: str) -> ListResult:
        return parse_list(self.session.request("GET", f"{self.path}/search", params={"q": query}))


class LedgerResource(Resource):
    def __init__(self, session: ClientSession):
        super().__init__(session, "/ledger/entries")

    def statement(self, party_id: int, side: str = "all") -> Dict[str, Any]:
        return self.session.request(
            "GET", f"/ledger/parties/{party_id}/entries", params={"side": side}
        )

    def summary(self, party_id: int) -> Dict[str, Any]:
        return self.session.request("GET", f"/ledger/parties/{party_id}/summary")

    def outstanding(self, party_id: int) -> Dict[str, Any]:
        return self.session.request("GET", f"/ledger/parties/{party_id}/outstanding")


class ReportResource:
    def __init__(self, session: ClientSession):
        self.session = session

    def _get(self, name: str, **params) -> Any:
        return self.session.request("GET", f"/reports/{name}", params=params or None)

    def categories(self, kind: str = "expense") -> ListResult:
        return parse_list(self._get("categories", kind=kind))

    def monthly(self) -> ListResult:
        return parse_list(self._get("monthly"))

    def statistics(self) -> Dict[str, Any]:
        return self._get("statistics")

    def insights(self) -> Optional[Dict[str, Any]]:
        return self._get("insights")

    def forecast(self) -> Dict[str, Any]:
        return self._get("forecast")

    def budgets(self, monthly_income: Optional[float] = None) -> Dict[str, Any]:
        if monthly_income is None:
            return self._get("budgets")
        return self._get("budgets", monthlyIncome=monthly_income)

    def recommendations(self) -> ListResult:
        return parse_list(self._get("recommendations"))

    def savings_goals(self) -> ListResult:
        return parse_list(self._get("savings-goals"))


class FinanceTrackerClient:
    """
    Entry point for API calls.

    >>> client = FinanceTrackerClient(ClientSession("http://localhost:8080/api"))
    >>> client.login("me@example.com", "secret")
    >>> client.expenses.list().items
    """

    def __init__(self, session: ClientSession):
        self.session = session
        self.expenses = Resource(session, "/expenses")
        self.income = Resource(session, "/income")
        self.credits = Resource(session, "/credits")
        self.notes = Resource(session, "/notes")
        self.tasks = Resource(session, "/tasks")
        self.budgets = Resource(session, "/budgets")
        self.recurring = RecurringResource(session, "/recurring")
        self.templates = Resource(session, "/templates")
        self.savings_goals = Resource(session, "/savings-goals")
        self.parties = PartyResource(session, "/parties")
        self.ledger = LedgerResource(session)
        self.reports = ReportResource(session)

    def register(self, username: str, email: str, password: str) -> Dict[str, Any]:
        data = self.session.request(
            "POST", "/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        self.session.token = data["access_token"]
        return data["user"]

    def login(self, email: str, password: str) -> Dict[str, Any]:
        data = self.session.request("POST", "/auth/login", json={"email": email, "password": password})
        self.session.token = data["access_token"]
        return data["user"]

    def me(self) -> Dict[str, Any]:
        return self.session.request("GET", "/auth/me")

    def health(self) -> Dict[str, Any]:
        return self.session.request("GET", "/health")

    def logout(self) -> None:
        self.session.logout()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "FinanceTrackerClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
