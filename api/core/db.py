"""
Async database access helpers (raw SQL) using asyncpg.

The `Database` handle owns the connection pool. FastAPI creates it on startup,
stores it on `app.state.db` and closes it on shutdown (see `api/main.py`).
Routes receive it through the `get_db` dependency and pass it down to the
repository functions explicitly.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from .schema import SCHEMA_SQL


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    """
    Thin wrapper over an asyncpg pool or a single connection.

    Both expose fetchrow/fetch/execute, so the same helpers work inside and
    outside a transaction.
    """

    def __init__(self, executor: asyncpg.Pool | asyncpg.Connection) -> None:
        self._executor = executor

    @property
    def _is_pool(self) -> bool:
        # Only pools hand out connections.
        return hasattr(self._executor, "acquire")

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self._executor.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self._executor.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). Returns the command status tag.
        """
        return await self._executor.execute(sql, *args)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["Database"]:
        """
        Run a block of statements on one connection inside a transaction.

        Nested use on a connection-bound handle becomes a savepoint.
        """
        if self._is_pool:
            async with self._executor.acquire() as conn:
                async with conn.transaction():
                    yield Database(conn)
        else:
            async with self._executor.transaction():
                yield self

    async def close(self) -> None:
        if self._is_pool:
            await self._executor.close()


async def connect() -> Database:
    pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=1,
        max_size=5,
        command_timeout=30,
    )
    return Database(pool)


async def ensure_schema(database: Database) -> None:
    # Idempotent: every statement uses IF NOT EXISTS.
    await database.execute(SCHEMA_SQL)


def get_db(request: Request) -> Database:
    database = getattr(request.app.state, "db", None)
    if database is None:
        raise RuntimeError("Database is not initialized. Call connect() on startup.")
    return database
