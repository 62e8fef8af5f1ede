"""
Auth business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import Database
from core.validation import nul_character_errors, raise_if_invalid
from users import repository as users_repository

from . import schemas, security

logger = logging.getLogger(__name__)


async def login(db: Database, payload: schemas.LoginRequest) -> schemas.LoginResponse:
    raise_if_invalid(
        nul_character_errors({"username": payload.username, "password": payload.password})
    )
    user_row = await users_repository.get_user_by_username(db, payload.username)
    is_valid = user_row is not None and security.verify_password(
        payload.password,
        str(user_row.get("password_hash") or ""),
    )
    if not is_valid:
        logger.info("login_failed username=%s", payload.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid username or password",
        )

    token = security.build_access_token(
        user_id=str(user_row["id"]),
        username=str(user_row["username"]),
    )
    logger.info("login_succeeded user_id=%s", user_row["id"])
    return schemas.LoginResponse(
        token=token,
        username=str(user_row["username"]),
        name=user_row.get("name"),
    )


async def resolve_user(db: Database, access_token: str) -> dict | None:
    """
    Map a bearer token to its user row, or None when it does not resolve.
    """
    try:
        user_id = security.access_token_user_id(access_token)
    except security.AuthSecurityError as exc:
        logger.debug("token_rejected reason=%s", exc)
        return None

    user_row = await users_repository.get_user_by_id(db, user_id)
    if user_row is None:
        logger.debug("token_rejected reason=unknown_user user_id=%s", user_id)
    return user_row
