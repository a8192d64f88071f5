"""
Comment service: comments as a sub-resource of an article.

Each operation checks the parent article on its own; a missing parent
is reported with the wording that operation has always used
("Article Not Found" when listing, "Not Found" when posting).
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import ARTICLE_NOT_FOUND, NOT_FOUND, ApiError, ErrorKind
from news_api.queries import parse_identifier, validate_sort
from news_api.repositories import articles as article_repo
from news_api.repositories import comments as comment_repo
from news_api.repositories import users as user_repo
from news_api.schemas import CommentCreate

logger = logging.getLogger(__name__)


async def list_comments(
    db: AsyncSession,
    raw_article_id: str,
    sort_by: str | None = None,
    order: str | None = None,
) -> list[dict]:
    """
    Return all comments on the article, newest first unless told otherwise.

    An existing article with no comments yields an empty list.
    """
    article_id = parse_identifier(raw_article_id, field="article_id")
    sort = validate_sort("comments", sort_by, order)

    if not await article_repo.article_exists(db, article_id):
        raise ApiError(ErrorKind.ARTICLE_NOT_FOUND, ARTICLE_NOT_FOUND)

    return await comment_repo.select_comments_by_article(db, article_id, sort)


async def create_comment(
    db: AsyncSession,
    raw_article_id: str,
    data: CommentCreate | None,
) -> dict:
    """
    Post a new comment on the article and return it.

    Missing ``body`` / ``username`` is rejected before the article is
    looked up.  The comment starts with zero votes; ``comment_id`` and
    ``created_at`` are assigned by the datastore.
    """
    article_id = parse_identifier(raw_article_id, field="article_id")

    data = data or CommentCreate()
    for field in ("body", "username"):
        value = getattr(data, field)
        if value is None or not value.strip():
            raise ApiError(ErrorKind.MISSING_FIELD, field=field)

    if not await article_repo.article_exists(db, article_id):
        raise ApiError(ErrorKind.ARTICLE_NOT_FOUND, NOT_FOUND)
    if not await user_repo.user_exists(db, data.username):
        raise ApiError(ErrorKind.USER_NOT_FOUND, field="username")

    comment = await comment_repo.insert_comment(
        db, article_id=article_id, author=data.username, body=data.body
    )
    logger.info("Comment %d posted on article %d by %s", comment["comment_id"], article_id, data.username)
    return comment


async def delete_comment(db: AsyncSession, raw_comment_id: str) -> None:
    """Remove the comment permanently."""
    comment_id = parse_identifier(raw_comment_id, field="comment_id")

    if not await comment_repo.delete_comment(db, comment_id):
        raise ApiError(ErrorKind.COMMENT_NOT_FOUND)
    logger.info("Comment %d deleted", comment_id)
