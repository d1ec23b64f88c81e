from fastapi import APIRouter, Depends, HTTPException, status

from finance_tracker.core.auth import get_current_user
from finance_tracker.core.logging import get_logger
from finance_tracker.core.security import create_access_token, verify_password
from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.db.session import get_db
from finance_tracker.models.user import UserCreate, UserInDB, UserResponse
from finance_tracker.repositories.user_repo import UserRepository
from finance_tracker.schemas.auth import TokenResponse, UserLogin

logger = get_logger(__name__)

router = APIRouter()


def _token_response(user: UserInDB) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(user.id),
        token_type="bearer",
        user=UserResponse(id=user.id, username=user.username, email=user.email),
    )


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: JsonDatabase = Depends(get_db)):
    """Register a new user"""
    user_repo = UserRepository(db)

    if user_repo.get_user_by_username(user_data.username):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this username already exists"
        )
    if user_repo.get_user_by_email(user_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this email already exists"
        )

    user = user_repo.create_user(user_data)
    logger.info("Registered user %s", user.id)
    return _token_response(user)


@router.post("/login", response_model=TokenResponse)
async def login(credentials: UserLogin, db: JsonDatabase = Depends(get_db)):
    """Login with email and password"""
    user = UserRepository(db).get_user_by_email(credentials.email)

    if user is None or not verify_password(credentials.password, user.password_hash):
        logger.info("Failed login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )

    return _token_response(user)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: UserInDB = Depends(get_current_user)):
    """Get current user information"""
    return UserResponse(
        id=current_user.id,
        username=current_user.username,
        email=current_user.email,
    )
