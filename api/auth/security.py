"""
Password hashing and bearer tokens for the bloglist login.

Tokens are HS256 JWTs whose subject is the user id. `ACCESS_TOKEN_EXPIRE_MIN`
sets their lifetime; `BCRYPT_ROUNDS` trades hash cost for test speed.
"""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import bcrypt
import jwt

TOKEN_TYPE = "access"
DEFAULT_JWT_SECRET = "dev-change-this-secret"


class AuthSecurityError(RuntimeError):
    pass


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, "").strip() or default)
    except ValueError:
        return default


def jwt_secret() -> str:
    # Set JWT_SECRET outside local development.
    return os.environ.get("JWT_SECRET", "").strip() or DEFAULT_JWT_SECRET


def jwt_algorithm() -> str:
    return os.environ.get("JWT_ALG", "").strip() or "HS256"


def token_lifetime() -> timedelta:
    return timedelta(minutes=_env_int("ACCESS_TOKEN_EXPIRE_MIN", 60))


def bcrypt_rounds() -> int:
    # bcrypt accepts 4..31.
    return max(4, min(_env_int("BCRYPT_ROUNDS", 10), 31))


def hash_password(plain_password: str) -> str:
    if not plain_password:
        raise AuthSecurityError("Password is empty.")
    salt = bcrypt.gensalt(rounds=bcrypt_rounds())
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str | None, password_hash: str | None) -> bool:
    if not plain_password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash.
        return False


def build_access_token(*, user_id: str, username: str) -> str:
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "username": username,
        "type": TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + token_lifetime(),
    }
    return jwt.encode(claims, jwt_secret(), algorithm=jwt_algorithm())


def decode_access_token(token: str | None) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        claims = jwt.decode(raw, jwt_secret(), algorithms=[jwt_algorithm()])
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Access token is expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    if claims.get("type") != TOKEN_TYPE:
        raise AuthSecurityError("Token is not an access token.")
    return claims


def access_token_user_id(token: str | None) -> UUID:
    """
    Return the id of the user a token was issued to.

    Raises `AuthSecurityError` for anything that is not a live access token
    naming a user id.
    """
    claims = decode_access_token(token)
    try:
        return UUID(str(claims.get("sub") or ""))
    except ValueError as exc:
        raise AuthSecurityError("Token subject is not a user id.") from exc
