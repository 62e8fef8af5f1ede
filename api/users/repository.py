"""
User persistence helpers.
"""

from __future__ import annotations

import json
from uuid import UUID

from core.db import Database

_USER_COLUMNS = "id, username, name, password_hash, blog_ids, created_at"


async def create_user(
    db: Database,
    *,
    username: str,
    name: str | None,
    password_hash: str,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO users (username, name, password_hash)
        VALUES ($1, $2, $3)
        RETURNING {_USER_COLUMNS}
        """,
        username,
        name,
        password_hash,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_id(db: Database, user_id: UUID) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_USER_COLUMNS}
        FROM users
        WHERE id = $1
        """,
        user_id,
    )


async def get_user_by_username(db: Database, username: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_USER_COLUMNS}
        FROM users
        WHERE username = $1
        """,
        username,
    )


async def list_users_with_blogs(db: Database) -> list[dict]:
    """
    All users with `blogs` populated as {id, title, author, url} in stored order.

    Back-references to blogs that no longer exist are skipped.
    """
    rows = await db.fetch_all(
        """
        SELECT
          u.id,
          u.username,
          u.name,
          COALESCE(
            (
              SELECT json_agg(
                       json_build_object('id', b.id, 'title', b.title, 'author', b.author, 'url', b.url)
                       ORDER BY ref.ord
                     )
              FROM unnest(u.blog_ids) WITH ORDINALITY AS ref(blog_id, ord)
              JOIN blogs b ON b.id = ref.blog_id
            ),
            '[]'::json
          ) AS blogs
        FROM users u
        ORDER BY u.created_at, u.id
        """
    )
    for row in rows:
        # asyncpg hands json columns back as text.
        if isinstance(row["blogs"], str):
            row["blogs"] = json.loads(row["blogs"])
    return rows


async def append_blog_reference(db: Database, *, user_id: UUID, blog_id: UUID) -> None:
    await db.execute(
        """
        UPDATE users
        SET blog_ids = array_append(blog_ids, $2)
        WHERE id = $1
        """,
        user_id,
        blog_id,
    )


async def delete_all_users(db: Database) -> None:
    await db.execute("DELETE FROM users")
