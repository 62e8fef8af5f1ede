"""
Blog persistence.

Read queries return blogs with the owner populated as flat `user_*` columns
(NULL when the blog has no owner or the owner was removed).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core.db import Database

_POPULATED_SELECT = """
SELECT
  b.id,
  b.title,
  b.author,
  b.url,
  b.likes,
  b.comments,
  b.user_id,
  u.username AS user_username,
  u.name AS user_name
FROM blogs b
LEFT JOIN users u ON u.id = b.user_id
"""

# Columns a blog update is allowed to replace.
UPDATABLE_COLUMNS = ("title", "author", "url", "likes")


async def list_blogs(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(
        _POPULATED_SELECT
        + """
        ORDER BY b.created_at, b.id
        """
    )


async def get_blog(db: Database, blog_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        _POPULATED_SELECT
        + """
        WHERE b.id = $1
        """,
        blog_id,
    )


async def insert_blog(
    db: Database,
    *,
    title: str,
    author: str | None,
    url: str,
    likes: int,
    user_id: UUID | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO blogs (title, author, url, likes, user_id)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id
        """,
        title,
        author,
        url,
        likes,
        user_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert blog.")
    return row


async def append_comment(db: Database, blog_id: UUID, comment: str) -> bool:
    row = await db.fetch_one(
        """
        UPDATE blogs
        SET comments = array_append(comments, $2)
        WHERE id = $1
        RETURNING id
        """,
        blog_id,
        comment,
    )
    return row is not None


async def update_blog(db: Database, blog_id: UUID, fields: dict[str, Any]) -> bool:
    """
    Replace the given columns. Returns False when the blog does not exist.
    """
    unknown = set(fields) - set(UPDATABLE_COLUMNS)
    if unknown:
        raise ValueError(f"Cannot update blog columns: {sorted(unknown)}")

    if not fields:
        row = await db.fetch_one("SELECT id FROM blogs WHERE id = $1", blog_id)
        return row is not None

    columns = [c for c in UPDATABLE_COLUMNS if c in fields]
    assignments = ", ".join(f"{column} = ${i}" for i, column in enumerate(columns, start=2))
    row = await db.fetch_one(
        f"""
        UPDATE blogs
        SET {assignments}
        WHERE id = $1
        RETURNING id
        """,
        blog_id,
        *[fields[c] for c in columns],
    )
    return row is not None


async def delete_blog(db: Database, blog_id: UUID) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM blogs
        WHERE id = $1
        RETURNING id
        """,
        blog_id,
    )
    return row is not None


async def delete_all_blogs(db: Database) -> None:
    await db.execute("DELETE FROM blogs")
