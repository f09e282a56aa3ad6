"""Service layer for account signup, signin and token issuance."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from core.security import create_access_token, hash_password, needs_rehash, verify_password
from models.user import User
from services.exceptions import EmailInUseError, InvalidCredentialsError
from services.user_service import is_email_conflict

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Look up a user by login email."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def signup(db: AsyncSession, email: str, password: str) -> User:
    """
    Create a new account.

    The unique constraint on users.email is the source of truth for
    duplicates; there is no pre-check, so concurrent signups for the same
    email cannot both succeed.

    Raises:
        EmailInUseError: If the email already belongs to an account.

    Note: Uses flush(), not commit. Session generator handles commit at request end.
    Signup is the only write in its request, so rolling back on conflict
    discards nothing else.
    """
    password_hash = await hash_password(password)

    user = User(email=email, hash=password_hash)
    db.add(user)
    try:
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        if is_email_conflict(e):
            logger.info("Signup rejected, email already in use")
            raise EmailInUseError(email) from e
        raise

    await db.refresh(user)
    return user


def issue_token(settings: Settings, user_id: int, email: str) -> dict[str, str]:
    """Sign an access token for the user. No refresh token is issued."""
    return {"access_token": create_access_token(user_id, email, settings)}


async def signin(
    db: AsyncSession,
    settings: Settings,
    email: str,
    password: str,
) -> dict[str, str]:
    """
    Exchange email and password for an access token.

    Raises:
        InvalidCredentialsError: For an unknown email or a wrong password alike.
    """
    user = await get_user_by_email(db, email)
    if user is None:
        logger.debug("Signin failed: no account for email")
        raise InvalidCredentialsError

    if not await verify_password(user.hash, password):
        logger.debug("Signin failed: password mismatch for user id=%s", user.id)
        raise InvalidCredentialsError

    if needs_rehash(user.hash):
        user.hash = await hash_password(password)
        await db.flush()

    return issue_token(settings, user.id, user.email)
