from pydantic import BaseModel, EmailStr, Field, ConfigDict

from finance_tracker.models.base import Record


class UserBase(BaseModel):
    """Base user schema."""
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr


class UserCreate(UserBase):
    """User creation schema."""
    password: str = Field(..., min_length=6, max_length=72)


class UserResponse(UserBase):
    """User response schema."""
    id: int

    model_config = ConfigDict(from_attributes=True)


class UserInDB(Record):
    """User as stored in ``users.json``."""
    username: str
    email: str
    password_hash: str
