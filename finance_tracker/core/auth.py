from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from finance_tracker.core.logging import get_logger
from finance_tracker.core.security import decode_access_token
from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.db.session import get_db
from finance_tracker.models.user import UserInDB
from finance_tracker.repositories.user_repo import UserRepository

logger = get_logger(__name__)

security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: JsonDatabase = Depends(get_db),
) -> UserInDB:
    """Resolve the user a bearer token was issued to."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        logger.info("Request without bearer token")
        raise credentials_exception

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        logger.info("Rejected invalid bearer token")
        raise credentials_exception

    user = UserRepository(db).get_user_by_id(user_id)
    if user is None:
        logger.info("Token subject %s no longer exists", user_id)
        raise credentials_exception

    return user
