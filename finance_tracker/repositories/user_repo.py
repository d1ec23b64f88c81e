from typing import Optional

from finance_tracker.core.security import hash_password
from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.models.base import timestamp
from finance_tracker.models.user import UserCreate, UserInDB
from finance_tracker.repositories.base import next_id


class UserRepository:
    """User operations against ``users.json``."""

    def __init__(self, db: JsonDatabase):
        self.db = db

    def create_user(self, user_data: UserCreate) -> UserInDB:
        """Create a new user."""
        users = self.db.read_users()
        now = timestamp()
        user = UserInDB(
            id=next_id(users),
            username=user_data.username,
            email=user_data.email,
            password_hash=hash_password(user_data.password),
            created_at=now,
            updated_at=now,
        )
        users.append(user.to_document())
        self.db.write_users(users)
        return user

    def _find(self, field: str, value) -> Optional[UserInDB]:
        for user in self.db.read_users():
            if user.get(field) == value:
                return UserInDB.model_validate(user)
        return None

    def get_user_by_email(self, email: str) -> Optional[UserInDB]:
        """Get user by email."""
        return self._find("email", email)

    def get_user_by_username(self, username: str) -> Optional[UserInDB]:
        """Get user by username."""
        return self._find("username", username)

    def get_user_by_id(self, user_id: int) -> Optional[UserInDB]:
        """Get user by ID."""
        return self._find("id", user_id)
