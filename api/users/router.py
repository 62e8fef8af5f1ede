"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: schemas.CreateUserRequest,
    db: Database = Depends(get_db),
) -> schemas.UserResponse:
    return await service.create_user(db, request)


@router.get("/users")
async def list_users(db: Database = Depends(get_db)) -> list[schemas.UserResponse]:
    return await service.list_users(db)


@router.delete("/users", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_users(db: Database = Depends(get_db)) -> Response:
    """
    Remove every user. Test/utility operation.
    """
    await service.delete_all_users(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
