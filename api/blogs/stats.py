"""
Aggregates over a list of blogs.
"""

from __future__ import annotations

from typing import Any, Iterable


def total_likes(blogs: Iterable[dict[str, Any]]) -> int:
    return sum(int(blog.get("likes") or 0) for blog in blogs)


def favorite_blog(blogs: Iterable[dict[str, Any]]) -> dict[str, Any] | None:
    """
    Blog with the most likes; on a tie the later one wins.
    """
    favorite: dict[str, Any] | None = None
    for blog in blogs:
        if favorite is None or int(blog.get("likes") or 0) >= int(favorite.get("likes") or 0):
            favorite = blog
    return favorite
