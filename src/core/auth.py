"""Authentication module: bearer access token validation for protected routes."""
import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings, get_settings
from core.security import InvalidTokenError, decode_access_token
from db.session import get_async_session
from models.user import User
from services.user_service import get_user

logger = logging.getLogger(__name__)


# HTTP Bearer token scheme
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_user_id_from_claims(payload: dict) -> int:
    """
    Extract the user id from the token's sub claim.

    Raises:
        HTTPException: 401 if sub is missing or not an integer id.
    """
    sub = payload.get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError):
        raise _unauthorized("Invalid token: bad sub claim")


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    Dependency that validates the bearer token and returns the current user.

    Rejects with 401 before any route logic runs when the token is missing,
    malformed, expired, wrongly signed, or refers to a user that no longer exists.
    The resolved identity is also recorded on request.state (user_id, email).
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    try:
        payload = decode_access_token(credentials.credentials, settings)
    except InvalidTokenError as e:
        raise _unauthorized(e.reason)

    user_id = get_user_id_from_claims(payload)
    user = await get_user(db, user_id)
    if user is None:
        logger.info("Token presented for missing user id=%s", user_id)
        raise _unauthorized("User not found")

    request.state.user_id = user.id
    request.state.email = user.email
    return user
