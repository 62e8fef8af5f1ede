"""
Blog API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import dependencies as auth_dependencies
from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/blogs")
async def list_blogs(db: Database = Depends(get_db)) -> list[schemas.BlogResponse]:
    return await service.list_blogs(db)


@router.get("/blogs/stats")
async def blog_stats(db: Database = Depends(get_db)) -> schemas.BlogStatsResponse:
    """
    Blog count, like total and the most-liked blog.
    """
    return await service.blog_stats(db)


@router.post("/blogs", status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: schemas.CreateBlogRequest,
    db: Database = Depends(get_db),
    current_user: dict | None = Depends(auth_dependencies.get_optional_user),
) -> schemas.BlogResponse:
    return await service.create_blog(db, request, current_user=current_user)


@router.post("/blogs/{blog_id}/comments", status_code=status.HTTP_201_CREATED)
async def add_comment(
    blog_id: str,
    request: schemas.CommentRequest,
    db: Database = Depends(get_db),
) -> schemas.BlogResponse:
    return await service.add_comment(db, blog_id, request)


@router.delete("/blogs/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: str,
    db: Database = Depends(get_db),
    current_user: dict | None = Depends(auth_dependencies.get_optional_user),
) -> Response:
    await service.delete_blog(db, blog_id, current_user=current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/blogs/{blog_id}")
async def update_blog(
    blog_id: str,
    request: schemas.UpdateBlogRequest,
    db: Database = Depends(get_db),
) -> schemas.BlogResponse:
    return await service.update_blog(db, blog_id, request)


@router.delete("/blogs", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_blogs(db: Database = Depends(get_db)) -> Response:
    """
    Remove every blog. Test/utility operation.
    """
    await service.delete_all_blogs(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
