import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from finance_tracker.core.security import create_access_token
from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.db.session import get_db
from finance_tracker.main import app
from finance_tracker.models.user import UserCreate
from finance_tracker.repositories.user_repo import UserRepository


@pytest.fixture
def test_db(tmp_path) -> JsonDatabase:
    """Fresh JSON database in a temporary directory."""
    db = JsonDatabase(tmp_path / "users.json", tmp_path / "database.json")
    db.initialize()
    return db


@pytest.fixture
def sample_user_data():
    """Sample user data for testing."""
    return {
        "username": "johndoe",
        "email": "john@example.com",
        "password": "SecurePassword123"
    }


@pytest.fixture
def created_user(test_db, sample_user_data):
    """Create a sample user in the test database."""
    return UserRepository(test_db).create_user(UserCreate(**sample_user_data))


@pytest.fixture
def valid_token(created_user):
    """Create a valid JWT token for testing."""
    return create_access_token(created_user.id)


@pytest.fixture
def auth_headers(valid_token):
    return {"Authorization": f"Bearer {valid_token}"}


@pytest_asyncio.fixture
async def client(test_db):
    """HTTP client against the app with the test database injected."""
    app.dependency_overrides[get_db] = lambda: test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
