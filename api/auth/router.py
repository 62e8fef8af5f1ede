"""
Login endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.post("/login")
async def login(
    request: schemas.LoginRequest,
    db: Database = Depends(get_db),
) -> schemas.LoginResponse:
    return await service.login(db, request)
