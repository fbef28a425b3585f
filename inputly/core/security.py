"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from inputly.core.config import settings
from inputly.core.errors import HashingError, TokenExpired, TokenInvalid

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72

# Claims every access token must carry besides iat/exp.
IDENTITY_CLAIMS = ("id", "email", "role", "name")


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    try:
        salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
        return bcrypt.hashpw(_password_bytes(plain_password), salt).decode("utf-8")
    except (ValueError, TypeError) as e:
        raise HashingError("Password hashing failed") from e


def verify_password(plain_password: str, hashed: str) -> bool:
    """
    Verify a plain password against a stored hash in constant time.
    Returns False on mismatch; raises HashingError if the stored hash is malformed.
    """
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError) as e:
        raise HashingError("Stored password hash is malformed") from e


def create_access_token(
    identity: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT carrying id, email, role and name plus iat and exp."""
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {claim: identity[claim] for claim in IDENTITY_CLAIMS}
    payload["iat"] = now
    payload["exp"] = now + expires_delta
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return the identity claims (id, email, role, name).
    Raises TokenExpired once exp has elapsed and TokenInvalid for any other failure.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "iat", *IDENTITY_CLAIMS]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpired() from e
    except jwt.PyJWTError as e:
        raise TokenInvalid() from e
    return {claim: payload[claim] for claim in IDENTITY_CLAIMS}
