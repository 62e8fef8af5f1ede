"""
Blog business logic.

Scope:
- listing with the owner populated
- creation by an authenticated user (blog row + owner back-reference in one
  transaction)
- comments, updates, owner-only deletion
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from fastapi import HTTPException, status

from core.db import Database
from core.validation import raise_if_invalid
from users import repository as users_repository

from . import repository, schemas, stats, validation

logger = logging.getLogger(__name__)


def _parse_blog_id(raw_id: str) -> UUID:
    try:
        return UUID(raw_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="malformatted id",
        ) from exc


def _to_blog_response(row: dict[str, Any]) -> schemas.BlogResponse:
    owner = None
    # user_username is NULL when the referenced user no longer exists.
    if row.get("user_id") is not None and row.get("user_username") is not None:
        owner = schemas.BlogOwner(
            id=str(row["user_id"]),
            username=str(row["user_username"]),
            name=row.get("user_name"),
        )
    return schemas.BlogResponse(
        id=str(row["id"]),
        title=str(row["title"]),
        author=row.get("author"),
        url=str(row["url"]),
        likes=int(row.get("likes") or 0),
        user=owner,
        comments=list(row.get("comments") or []),
    )


async def _require_blog(db: Database, blog_id: UUID) -> schemas.BlogResponse:
    row = await repository.get_blog(db, blog_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found.")
    return _to_blog_response(row)


async def list_blogs(db: Database) -> list[schemas.BlogResponse]:
    rows = await repository.list_blogs(db)
    return [_to_blog_response(row) for row in rows]


async def create_blog(
    db: Database,
    payload: schemas.CreateBlogRequest,
    *,
    current_user: dict | None,
) -> schemas.BlogResponse:
    if current_user is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="no user")

    raise_if_invalid(validation.validate_new_blog(payload.model_dump()))

    user_id = current_user["id"]
    async with db.transaction() as tx:
        row = await repository.insert_blog(
            tx,
            title=payload.title,
            author=payload.author,
            url=payload.url,
            likes=payload.likes or 0,
            user_id=user_id,
        )
        blog_id = row["id"]
        await users_repository.append_blog_reference(tx, user_id=user_id, blog_id=blog_id)

    logger.info("blog_created blog_id=%s user_id=%s", blog_id, user_id)
    return await _require_blog(db, blog_id)


async def add_comment(
    db: Database,
    raw_blog_id: str,
    payload: schemas.CommentRequest,
) -> schemas.BlogResponse:
    blog_id = _parse_blog_id(raw_blog_id)
    raise_if_invalid(validation.validate_comment(payload.comment))

    appended = await repository.append_comment(db, blog_id, payload.comment)
    if not appended:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid blog ID or comment",
        )
    logger.info("comment_added blog_id=%s", blog_id)
    return await _require_blog(db, blog_id)


async def delete_blog(db: Database, raw_blog_id: str, *, current_user: dict | None) -> None:
    blog_id = _parse_blog_id(raw_blog_id)
    row = await repository.get_blog(db, blog_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found.")

    owner_id = row.get("user_id")
    if current_user is None or owner_id is None or str(owner_id) != str(current_user["id"]):
        logger.info(
            "blog_delete_denied blog_id=%s user_id=%s",
            blog_id,
            current_user["id"] if current_user is not None else None,
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="only creator of the blog can delete it",
        )

    await repository.delete_blog(db, blog_id)
    logger.info("blog_deleted blog_id=%s user_id=%s", blog_id, current_user["id"])


async def update_blog(
    db: Database,
    raw_blog_id: str,
    payload: schemas.UpdateBlogRequest,
) -> schemas.BlogResponse:
    # No ownership check here, unlike delete_blog.
    blog_id = _parse_blog_id(raw_blog_id)
    fields = payload.model_dump(exclude_unset=True)
    raise_if_invalid(validation.validate_blog_update(fields))

    updated = await repository.update_blog(db, blog_id, fields)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found.")
    logger.info("blog_updated blog_id=%s fields=%s", blog_id, ",".join(sorted(fields)))
    return await _require_blog(db, blog_id)


async def delete_all_blogs(db: Database) -> None:
    await repository.delete_all_blogs(db)
    logger.info("blogs_deleted_all")


async def blog_stats(db: Database) -> schemas.BlogStatsResponse:
    rows = await repository.list_blogs(db)
    favorite = stats.favorite_blog(rows)
    return schemas.BlogStatsResponse(
        blogs=len(rows),
        total_likes=stats.total_likes(rows),
        favorite=(
            schemas.FavoriteBlog(
                id=str(favorite["id"]),
                title=str(favorite["title"]),
                author=favorite.get("author"),
                likes=int(favorite.get("likes") or 0),
            )
            if favorite is not None
            else None
        ),
    )
