"""Service layer for user profile operations."""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import EMAIL_UNIQUE_INDEX, User
from schemas.user import UserUpdate
from services.exceptions import EmailInUseError


def is_email_conflict(error: IntegrityError) -> bool:
    """True if the error is the users.email uniqueness violation (PostgreSQL or SQLite wording)."""
    message = str(error.orig)
    return EMAIL_UNIQUE_INDEX in message or "UNIQUE constraint failed: users.email" in message


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    """Get a user by ID."""
    return await db.get(User, user_id)


async def update_user(db: AsyncSession, user: User, data: UserUpdate) -> User:
    """
    Apply a partial profile update.

    Raises:
        EmailInUseError: If the new email belongs to another account.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(user, field, value)

    try:
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        if is_email_conflict(e):
            raise EmailInUseError(update_data.get("email", "")) from e
        raise

    await db.refresh(user)
    return user
