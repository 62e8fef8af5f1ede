"""
User API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    # Length rules live in users/validation.py so they produce FieldError results.
    username: str | None = Field(default=None, max_length=100)
    name: str | None = Field(default=None, max_length=200)
    password: str | None = Field(default=None, max_length=128)


class UserBlogSummary(BaseModel):
    id: str
    title: str
    author: str | None = None
    url: str


class UserResponse(BaseModel):
    id: str
    username: str
    name: str | None = None
    blogs: list[UserBlogSummary] = Field(default_factory=list)
