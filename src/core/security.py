"""Password hashing (argon2) and access token signing (JWT)."""
import logging
from datetime import UTC, datetime, timedelta

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from fastapi.concurrency import run_in_threadpool

from core.config import Settings

logger = logging.getLogger(__name__)


# argon2id with the library's RFC 9106 low-memory defaults.
# The encoded hash carries algorithm, parameters and salt, so no salt column is needed.
password_hasher = PasswordHasher()


class InvalidTokenError(Exception):
    """Raised when an access token cannot be trusted (bad signature, expired, malformed)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


async def hash_password(password: str) -> str:
    """Hash a plaintext password. Runs in a worker thread (argon2 is CPU and memory bound)."""
    return await run_in_threadpool(password_hasher.hash, password)


def _verify(password_hash: str, password: str) -> bool:
    try:
        return password_hasher.verify(password_hash, password)
    except VerifyMismatchError:
        return False
    except (VerificationError, InvalidHashError):
        logger.warning("Stored password hash could not be verified", exc_info=True)
        return False


async def verify_password(password_hash: str, password: str) -> bool:
    """Check a plaintext password against an encoded argon2 hash."""
    return await run_in_threadpool(_verify, password_hash, password)


def needs_rehash(password_hash: str) -> bool:
    """True if the hash was produced with parameters other than the current ones."""
    return password_hasher.check_needs_rehash(password_hash)


def create_access_token(user_id: int, email: str, settings: Settings) -> str:
    """
    Sign a short-lived access token for a user.

    Claims:
        sub: user id (as a string, per RFC 7519)
        email: user email at issuance time
        iat/exp: issuance and expiry, exp = iat + access_token_expire_minutes
    """
    issued_at = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.access_token_expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> dict:
    """
    Verify signature and expiry of an access token and return its claims.

    Raises:
        InvalidTokenError: If the token is expired, tampered with, or malformed.
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token has expired") from e
    except jwt.PyJWTError as e:
        # Log full details for debugging (server-side only)
        logger.warning("JWT validation failed: %s", e, exc_info=True)
        raise InvalidTokenError("Invalid token") from e
