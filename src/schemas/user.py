"""Pydantic schemas for user endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserResponse(BaseModel):
    """
    Schema for user responses.

    The password hash is deliberately not declared, so it is never serialized.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime


class UserUpdate(BaseModel):
    """Schema for a partial profile update. Only fields present in the body are applied."""

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)

    @field_validator("email")
    @classmethod
    def email_not_null(cls, v: str | None) -> str | None:
        """Email may be omitted but not cleared."""
        if v is None:
            raise ValueError("email cannot be null")
        return v
