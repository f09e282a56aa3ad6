"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


MAX_TITLE_LENGTH = 500


class BookmarkCreate(BaseModel):
    """
    Schema for creating a new bookmark.

    Unknown fields (including any owner/user_id) are ignored; the owner is
    always the authenticated user.
    """

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    description: str | None = None
    # Plain string rather than HttpUrl: links without a scheme are accepted as given
    link: str = Field(..., min_length=1)


class BookmarkUpdate(BaseModel):
    """Schema for a partial bookmark update. Only fields present in the body are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    description: str | None = None
    link: str | None = Field(default=None, min_length=1)

    @field_validator("title", "link")
    @classmethod
    def required_fields_not_null(cls, v: str | None) -> str | None:
        """Title and link may be omitted but not cleared."""
        if v is None:
            raise ValueError("field cannot be null")
        return v


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str | None
    link: str
    created_at: datetime
    updated_at: datetime
