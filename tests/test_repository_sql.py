"""Repository functions against a recording Database.

Invariants:
    - Blog updates only touch whitelisted columns, in a fixed order
    - Missing rows are reported as False / None, never raised
    - json columns returned as text are decoded
"""

from contextlib import asynccontextmanager
from uuid import uuid4

import pytest

from blogs import repository as blogs_repository
from users import repository as users_repository


class RecordingDatabase:
    def __init__(self, one=None, many=None):
        self.calls = []
        self._one = list(one or [])
        self._many = list(many or [])

    async def fetch_one(self, sql, *args):
        self.calls.append((" ".join(sql.split()), args))
        return self._one.pop(0) if self._one else None

    async def fetch_all(self, sql, *args):
        self.calls.append((" ".join(sql.split()), args))
        return self._many.pop(0) if self._many else []

    async def execute(self, sql, *args):
        self.calls.append((" ".join(sql.split()), args))
        return "OK"

    @asynccontextmanager
    async def transaction(self):
        yield self


async def test_update_blog_sets_only_supplied_columns():
    blog_id = uuid4()
    db = RecordingDatabase(one=[{"id": blog_id}])

    updated = await blogs_repository.update_blog(db, blog_id, {"likes": 4, "title": "New"})

    assert updated is True
    sql, args = db.calls[0]
    assert "SET title = $2, likes = $3 WHERE id = $1" in sql
    assert args == (blog_id, "New", 4)


async def test_update_blog_rejects_unknown_columns():
    with pytest.raises(ValueError):
        await blogs_repository.update_blog(RecordingDatabase(), uuid4(), {"user_id": uuid4()})


async def test_update_blog_without_fields_checks_existence():
    db = RecordingDatabase()
    assert await blogs_repository.update_blog(db, uuid4(), {}) is False
    assert db.calls[0][0].startswith("SELECT id FROM blogs")


async def test_append_comment_reports_missing_blog():
    db = RecordingDatabase()
    assert await blogs_repository.append_comment(db, uuid4(), "hi") is False
    assert "array_append(comments, $2)" in db.calls[0][0]


async def test_get_blog_populates_owner():
    db = RecordingDatabase()
    await blogs_repository.get_blog(db, uuid4())
    sql = db.calls[0][0]
    assert "LEFT JOIN users u ON u.id = b.user_id" in sql
    assert "u.username AS user_username" in sql
    assert "password_hash" not in sql


async def test_insert_blog_raises_when_nothing_returned():
    with pytest.raises(RuntimeError):
        await blogs_repository.insert_blog(
            RecordingDatabase(),
            title="t",
            author=None,
            url="u",
            likes=0,
            user_id=None,
        )


async def test_list_users_decodes_blog_json():
    user_id = uuid4()
    db = RecordingDatabase(
        many=[[{"id": user_id, "username": "james", "name": "J", "blogs": '[{"id": "1", "title": "t", "author": null, "url": "u"}]'}]]
    )
    rows = await users_repository.list_users_with_blogs(db)
    assert rows[0]["blogs"] == [{"id": "1", "title": "t", "author": None, "url": "u"}]
    assert "WITH ORDINALITY" in db.calls[0][0]


async def test_append_blog_reference_uses_array_append():
    db = RecordingDatabase()
    user_id, blog_id = uuid4(), uuid4()
    await users_repository.append_blog_reference(db, user_id=user_id, blog_id=blog_id)
    sql, args = db.calls[0]
    assert "SET blog_ids = array_append(blog_ids, $2)" in sql
    assert args == (user_id, blog_id)
