"""
Auth dependencies for FastAPI routes.

`get_optional_user` never rejects a request: routes decide what an unresolved
user means for them.
"""

from __future__ import annotations

from fastapi import Depends, Header

from core.db import Database, get_db

from . import service


def _extract_bearer_token(authorization: str | None) -> str | None:
    raw = (authorization or "").strip()
    if not raw:
        return None

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        return None

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        return None
    return token


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    return _extract_bearer_token(authorization)


async def get_optional_user(
    access_token: str | None = Depends(get_bearer_token),
    db: Database = Depends(get_db),
) -> dict | None:
    if access_token is None:
        return None
    return await service.resolve_user(db, access_token)
