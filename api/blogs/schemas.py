"""
Pydantic schemas for blog endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# likes is a bigint column.
MIN_LIKES = -(2**63)
MAX_LIKES = 2**63 - 1


class CreateBlogRequest(BaseModel):
    # Required-ness of title/url is checked in blogs/validation.py.
    title: str | None = Field(default=None, max_length=500)
    author: str | None = Field(default=None, max_length=200)
    url: str | None = Field(default=None, max_length=2000)
    likes: int | None = Field(default=None, ge=MIN_LIKES, le=MAX_LIKES)


class UpdateBlogRequest(BaseModel):
    """
    Fields left out of the body are not touched.
    """

    title: str | None = Field(default=None, max_length=500)
    author: str | None = Field(default=None, max_length=200)
    url: str | None = Field(default=None, max_length=2000)
    likes: int | None = Field(default=None, ge=MIN_LIKES, le=MAX_LIKES)


class CommentRequest(BaseModel):
    comment: str | None = Field(default=None, max_length=5000)


class BlogOwner(BaseModel):
    id: str
    username: str
    name: str | None = None


class BlogResponse(BaseModel):
    id: str
    title: str
    author: str | None = None
    url: str
    likes: int = 0
    user: BlogOwner | None = None
    comments: list[str] = Field(default_factory=list)


class FavoriteBlog(BaseModel):
    id: str
    title: str
    author: str | None = None
    likes: int


class BlogStatsResponse(BaseModel):
    blogs: int
    total_likes: int
    favorite: FavoriteBlog | None = None
