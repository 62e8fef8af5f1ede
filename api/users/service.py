"""
User business logic.
"""

from __future__ import annotations

import logging

import asyncpg

from auth import security
from core.db import Database
from core.validation import ValidationFailed, raise_if_invalid

from . import repository, schemas, validation

logger = logging.getLogger(__name__)


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=str(user_row["id"]),
        username=str(user_row["username"]),
        name=user_row.get("name"),
        blogs=[
            schemas.UserBlogSummary(
                id=str(blog["id"]),
                title=str(blog["title"]),
                author=blog.get("author"),
                url=str(blog["url"]),
            )
            for blog in user_row.get("blogs") or []
        ],
    )


async def create_user(db: Database, payload: schemas.CreateUserRequest) -> schemas.UserResponse:
    # Password is checked before anything else, hashing included.
    raise_if_invalid(validation.validate_password(payload.password))
    raise_if_invalid(validation.validate_username(payload.username))
    raise_if_invalid(validation.validate_name(payload.name))

    existing = await repository.get_user_by_username(db, payload.username)
    if existing is not None:
        raise ValidationFailed(validation.username_taken())

    password_hash = security.hash_password(payload.password)
    try:
        user_row = await repository.create_user(
            db,
            username=payload.username,
            name=payload.name,
            password_hash=password_hash,
        )
    except asyncpg.UniqueViolationError as exc:
        # Lost a race with a concurrent signup for the same username.
        raise ValidationFailed(validation.username_taken()) from exc

    logger.info("user_created user_id=%s", user_row["id"])
    return _to_user_response({**user_row, "blogs": []})


async def list_users(db: Database) -> list[schemas.UserResponse]:
    rows = await repository.list_users_with_blogs(db)
    return [_to_user_response(row) for row in rows]


async def delete_all_users(db: Database) -> None:
    await repository.delete_all_users(db)
    logger.info("users_deleted_all")
