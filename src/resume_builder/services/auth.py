"""Account registration, login and bearer-token lookup.

Passwords are kept as salted PBKDF2-SHA256 digests (``<salt>:<digest>`` in
hex). Registering or logging in issues a new opaque token, which replaces
any token the account held before.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
import secrets
from dataclasses import dataclass

from resume_builder.data.db import get_session
from resume_builder.data.models import User

logger = logging.getLogger(__name__)

__all__ = ["AuthenticatedUser", "authenticate_user", "create_user", "resolve_token"]

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16
_TOKEN_BYTES = 32


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity of the caller resolved from a bearer token."""

    id: int
    username: str


def _derive(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)


def _hash_password(password: str) -> str:
    salt = os.urandom(_SALT_BYTES)
    return f"{salt.hex()}:{_derive(password, salt).hex()}"


def _verify_password(password: str, stored_hash: str) -> bool:
    """Check *password* against a ``salt:digest`` value; malformed values never match."""
    salt_hex, sep, digest_hex = stored_hash.partition(":")
    if not sep:
        return False
    try:
        salt, digest = bytes.fromhex(salt_hex), bytes.fromhex(digest_hex)
    except ValueError:
        return False
    return hmac.compare_digest(_derive(password, salt), digest)


def _new_token() -> str:
    return secrets.token_urlsafe(_TOKEN_BYTES)


def create_user(username: str, password: str) -> tuple[str | None, str | None]:
    """Create a new user account.

    Returns:
        Tuple of (token, error message). On success, error is None.
    """
    username_clean = username.strip()
    if not username_clean:
        return None, "Username cannot be empty."
    if not password:
        return None, "Password cannot be empty."

    token = _new_token()
    with get_session() as session:
        existing = session.query(User).filter(User.username == username_clean).first()
        if existing is not None:
            return None, "Username already exists."

        session.add(
            User(
                username=username_clean,
                password_hash=_hash_password(password),
                api_token=token,
            )
        )
    logger.info("Created user %s", username_clean)
    return token, None


def authenticate_user(username: str, password: str) -> tuple[str | None, str | None]:
    """Authenticate a user by username and password, rotating their token.

    Returns:
        Tuple of (token, error message). On success, error is None.
    """
    username_clean = username.strip()
    if not username_clean or not password:
        return None, "Username and password are required."

    with get_session() as session:
        user = session.query(User).filter(User.username == username_clean).first()
        if user is None or not _verify_password(password, user.password_hash):
            return None, "Invalid username or password."

        token = _new_token()
        user.api_token = token
    return token, None


def resolve_token(token: str) -> AuthenticatedUser | None:
    """Return the user owning *token*, or None."""
    if not token:
        return None
    with get_session() as session:
        user = session.query(User).filter(User.api_token == token).first()
        if user is None:
            return None
        return AuthenticatedUser(id=user.id, username=user.username)
