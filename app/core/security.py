"""Password hashing and JWT creation/verification for authentication."""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Min/max lengths for registration input validation.
NAME_MIN_LEN = 1
NAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    role: str,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token with sub (user id), role, email, iat, exp and jti.

    jti is random so that two logins within the same second still produce
    distinct, independently revocable token strings.
    """
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_EXPIRE_MINUTES))
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "role": role,
        "email": email,
        "exp": expire,
        "iat": now,
        "jti": uuid.uuid4().hex,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, role, email, exp, iat, jti).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
    )
