"""
User endpoint tests — the read-only listing, lookup by username, and
the 405 fallback.
"""
import pytest
from httpx import AsyncClient


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_users(async_client: AsyncClient):
    resp = await async_client.get("/api/users")
    assert resp.status_code == 200
    users = resp.json()["users"]
    assert len(users) == 4
    for user in users:
        assert set(user) == {"username", "name", "avatar_url"}
    assert [u["username"] for u in users] == ["butter_bridge", "icellusedkars", "lurker", "rogersop"]


@pytest.mark.asyncio
async def test_get_user(async_client: AsyncClient):
    resp = await async_client.get("/api/users/rogersop")
    assert resp.status_code == 200
    user = resp.json()["user"]
    assert user["username"] == "rogersop"
    assert user["name"] == "paul"
    assert user["avatar_url"].startswith("https://")


@pytest.mark.asyncio
async def test_get_user_not_found(async_client: AsyncClient):
    resp = await async_client.get("/api/users/not-a-user")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "user not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/users", "/api/users/rogersop"])
async def test_users_method_not_allowed(async_client: AsyncClient, path: str):
    resp = await async_client.put(path)
    assert resp.status_code == 405
    assert resp.json() == {"msg": "Method Not Allowed"}
