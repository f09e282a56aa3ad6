"""Pydantic schemas for signup/signin endpoints."""
from pydantic import BaseModel, EmailStr, Field


class AuthRequest(BaseModel):
    """Credentials for signup and signin."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=1024)


class TokenResponse(BaseModel):
    """Signed bearer token returned by signin."""

    access_token: str
