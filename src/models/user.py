"""User model for storing account credentials and profile."""
from typing import TYPE_CHECKING

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from models.bookmark import Bookmark


EMAIL_UNIQUE_INDEX = "uq_users_email"


class User(Base, TimestampMixin):
    """User model - email is the login handle, hash is the argon2 password hash."""

    __tablename__ = "users"
    __table_args__ = (Index(EMAIL_UNIQUE_INDEX, "email", unique=True),)

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(String(255))
    hash: Mapped[str] = mapped_column(
        String(255),
        comment="Encoded argon2 hash (algorithm, parameters and salt included)",
    )
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    bookmarks: Mapped[list["Bookmark"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
