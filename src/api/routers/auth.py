"""Signup and signin endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_settings
from core.config import Settings
from schemas.auth import AuthRequest, TokenResponse
from schemas.user import UserResponse
from services import auth_service
from services.exceptions import EmailInUseError, InvalidCredentialsError

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=UserResponse, status_code=201)
async def signup(
    data: AuthRequest,
    db: AsyncSession = Depends(get_async_session),
) -> UserResponse:
    """Create an account. The response never includes the password hash."""
    try:
        user = await auth_service.signup(db, data.email, data.password)
    except EmailInUseError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return UserResponse.model_validate(user)


@router.post("/signin", response_model=TokenResponse, status_code=200)
async def signin(
    data: AuthRequest,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """
    Exchange credentials for a bearer access token.

    Tokens expire after ACCESS_TOKEN_EXPIRE_MINUTES (15 by default); sign in
    again to get a new one.
    """
    try:
        token = await auth_service.signin(db, settings, data.email, data.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return TokenResponse(**token)
