"""
Comment endpoint tests — listing under an article, posting, deleting,
and the ordering of validation vs existence checks.
"""
import pytest
from httpx import AsyncClient


def _ids(comments: list[dict]) -> list[int]:
    return [c["comment_id"] for c in comments]


# ---------------------------------------------------------------------------
# List comments
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_comments(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/1/comments")
    assert resp.status_code == 200
    comments = resp.json()["comments"]
    assert len(comments) == 3
    for comment in comments:
        assert set(comment) == {"comment_id", "article_id", "author", "body", "votes", "created_at"}
        assert comment["article_id"] == 1


@pytest.mark.asyncio
async def test_list_comments_default_newest_first(async_client: AsyncClient):
    comments = (await async_client.get("/api/articles/1/comments")).json()["comments"]
    assert _ids(comments) == [2, 1, 3]


@pytest.mark.asyncio
async def test_list_comments_order_asc(async_client: AsyncClient):
    comments = (await async_client.get("/api/articles/1/comments?order=asc")).json()["comments"]
    assert _ids(comments) == [3, 1, 2]


@pytest.mark.asyncio
async def test_list_comments_sort_by_votes(async_client: AsyncClient):
    comments = (await async_client.get("/api/articles/1/comments?sort_by=votes")).json()["comments"]
    assert [c["votes"] for c in comments] == [100, 16, 14]


@pytest.mark.asyncio
async def test_list_comments_sort_by_author_ties_broken_by_id(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/1/comments?sort_by=author&order=asc")
    assert _ids(resp.json()["comments"]) == [1, 2, 3]


@pytest.mark.asyncio
async def test_list_comments_empty_for_article_without_comments(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/2/comments")
    assert resp.status_code == 200
    assert resp.json() == {"comments": []}


@pytest.mark.asyncio
async def test_list_comments_article_not_found(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/1000/comments")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Article Not Found"}


@pytest.mark.asyncio
async def test_list_comments_invalid_article_id(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/not-an-id/comments")
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad Request"}


@pytest.mark.asyncio
async def test_list_comments_invalid_sort_by(async_client: AsyncClient):
    # comment_count is sortable for articles only
    resp = await async_client.get("/api/articles/1/comments?sort_by=comment_count")
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Invalid sort by query"}


@pytest.mark.asyncio
async def test_list_comments_invalid_order(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/1/comments?order=not-asc-or-desc")
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Invalid order query"}


# ---------------------------------------------------------------------------
# Post comment
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_post_comment(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/articles/1/comments", json={"body": "new comment", "username": "rogersop"}
    )
    assert resp.status_code == 201
    comment = resp.json()["comment"]
    assert comment["body"] == "new comment"
    assert comment["author"] == "rogersop"
    assert comment["votes"] == 0
    assert comment["article_id"] == 1
    assert comment["comment_id"] == 7
    assert comment["created_at"]


@pytest.mark.asyncio
async def test_post_comment_ignores_client_votes(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/articles/1/comments",
        json={"body": "vote stuffing", "username": "rogersop", "votes": 1000},
    )
    assert resp.status_code == 201
    assert resp.json()["comment"]["votes"] == 0


@pytest.mark.asyncio
async def test_posted_comment_is_listed_first(async_client: AsyncClient):
    await async_client.post(
        "/api/articles/1/comments", json={"body": "latest", "username": "lurker"}
    )
    comments = (await async_client.get("/api/articles/1/comments")).json()["comments"]
    assert comments[0]["body"] == "latest"
    assert len(comments) == 4


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"username": "rogersop"},
        {"body": "no author"},
        {},
        {"body": "   ", "username": "rogersop"},
        {"body": "blank author", "username": ""},
    ],
)
async def test_post_comment_missing_fields(async_client: AsyncClient, payload: dict):
    resp = await async_client.post("/api/articles/2/comments", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad Request"}


@pytest.mark.asyncio
async def test_post_comment_without_body_at_all(async_client: AsyncClient):
    resp = await async_client.post("/api/articles/2/comments")
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad Request"}


@pytest.mark.asyncio
async def test_post_comment_missing_fields_checked_before_article(async_client: AsyncClient):
    resp = await async_client.post("/api/articles/1000/comments", json={"username": "rogersop"})
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad Request"}


@pytest.mark.asyncio
async def test_post_comment_article_not_found(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/articles/1000/comments", json={"body": "new comment", "username": "rogersop"}
    )
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Not Found"}


@pytest.mark.asyncio
async def test_post_comment_unknown_user(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/articles/1/comments", json={"body": "who am I", "username": "not-a-user"}
    )
    assert resp.status_code == 404
    assert resp.json() == {"msg": "user not found"}


@pytest.mark.asyncio
async def test_post_comment_invalid_article_id(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/articles/not-an-id/comments", json={"body": "x", "username": "rogersop"}
    )
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad Request"}


@pytest.mark.asyncio
async def test_post_comment_malformed_json(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/articles/1/comments",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad Request"}


# ---------------------------------------------------------------------------
# Delete comment
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_delete_comment(async_client: AsyncClient):
    resp = await async_client.delete("/api/comments/1")
    assert resp.status_code == 204
    assert resp.content == b""

    comments = (await async_client.get("/api/articles/1/comments")).json()["comments"]
    assert 1 not in _ids(comments)


@pytest.mark.asyncio
async def test_deleted_comment_is_gone_everywhere(async_client: AsyncClient):
    assert (await async_client.delete("/api/comments/4")).status_code == 204

    resp = await async_client.delete("/api/comments/4")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "comment not found"}

    resp = await async_client.patch("/api/comments/4", json={"inc_votes": 1})
    assert resp.status_code == 404
    assert resp.json() == {"msg": "comment not found"}


@pytest.mark.asyncio
async def test_delete_comment_not_found(async_client: AsyncClient):
    resp = await async_client.delete("/api/comments/1000")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "comment not found"}


@pytest.mark.asyncio
async def test_delete_comment_invalid_id(async_client: AsyncClient):
    resp = await async_client.delete("/api/comments/not-an-id")
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad Request"}


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "PUT", "POST"])
async def test_comments_method_not_allowed(async_client: AsyncClient, method: str):
    resp = await async_client.request(method, "/api/comments/1")
    assert resp.status_code == 405
    assert resp.json() == {"msg": "Method Not Allowed"}
