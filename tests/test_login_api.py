"""Login + bearer token resolution.

Invariants:
    - Correct credentials give a token that resolves to the same user
    - Unknown username and wrong password share one 401 message
    - Expired, foreign-secret and unknown-subject tokens resolve to no user
"""

import jwt

from auth import security


async def test_login_returns_token(client, users):
    res = await client.post("/api/login", json={"username": "james", "password": "1234"})
    assert res.status_code == 200
    body = res.json()
    assert body["username"] == "james"
    assert body["name"] == "James Bond"
    payload = security.decode_access_token(body["token"])
    assert payload["sub"] == str(users["james"]["id"])


async def test_login_wrong_password(client, users):
    res = await client.post("/api/login", json={"username": "james", "password": "nope"})
    assert res.status_code == 401
    assert res.json()["detail"] == "invalid username or password"


async def test_login_unknown_user(client, users):
    res = await client.post("/api/login", json={"username": "ghost", "password": "1234"})
    assert res.status_code == 401
    assert res.json()["detail"] == "invalid username or password"


async def test_login_missing_fields_is_400(client, users):
    res = await client.post("/api/login", json={"username": "james"})
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "password"


async def test_expired_token_does_not_resolve(client, store, users, monkeypatch):
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MIN", "-5")
    token = security.build_access_token(user_id=str(users["james"]["id"]), username="james")

    res = await client.post(
        "/api/blogs",
        json={"title": "t", "url": "u"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 400
    assert store.blogs == {}


async def test_token_signed_with_other_secret_does_not_resolve(client, initial_blogs, users):
    token = jwt.encode(
        {"sub": str(users["james"]["id"]), "type": "access"},
        "another-secret-that-is-long-enough-for-hs256",
        algorithm="HS256",
    )
    res = await client.delete(
        f"/api/blogs/{initial_blogs[0]['id']}",
        headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 401


async def test_token_for_removed_user_does_not_resolve(client, store, initial_blogs, james_headers):
    store.users.clear()
    res = await client.post("/api/blogs", json={"title": "t", "url": "u"}, headers=james_headers)
    assert res.status_code == 400
    assert res.json()["detail"] == "no user"


async def test_non_bearer_scheme_is_ignored(client, initial_blogs):
    res = await client.delete(
        f"/api/blogs/{initial_blogs[0]['id']}",
        headers={"Authorization": "Basic abc"},
    )
    assert res.status_code == 401


async def test_login_with_nul_in_credentials_is_400(client, users):
    res = await client.post("/api/login", json={"username": "ja\u0000mes", "password": "1234"})
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "username"

    res = await client.post("/api/login", json={"username": "james", "password": "12\u000034"})
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "password"


async def test_token_with_non_uuid_subject_does_not_resolve(client, store):
    token = security.build_access_token(user_id="not-a-uuid", username="james")
    res = await client.post(
        "/api/blogs",
        json={"title": "t", "url": "u"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "no user"
