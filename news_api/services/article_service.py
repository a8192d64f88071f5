"""
Article service: listing and detail reads with the derived comment count.

Design notes
------------
- Query parameters are validated before any statement is issued, so a
  bad ``sort_by`` / ``order`` / id never reaches the datastore.
- The topic filter is two separate checks.  First: does the topic
  exist at all (404 when not)?  Second: which articles carry it (an
  empty list is a valid answer for an existing topic).
- Articles are not cached; see ``news_api.cache``.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import ARTICLE_ID_NOT_FOUND, ApiError, ErrorKind
from news_api.queries import parse_identifier, validate_sort
from news_api.repositories import articles as article_repo
from news_api.repositories import topics as topic_repo

logger = logging.getLogger(__name__)


async def list_articles(
    db: AsyncSession,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
) -> list[dict]:
    """
    Return every article (or every article in *topic*) with its
    ``comment_count``, ordered by the validated sort column and then by
    ``article_id`` ascending.

    Raises ``TopicNotFound`` when *topic* is given but no such topic
    exists.
    """
    sort = validate_sort("articles", sort_by, order)

    if topic is not None and not await topic_repo.topic_exists(db, topic):
        raise ApiError(ErrorKind.TOPIC_NOT_FOUND, field="topic")

    articles = await article_repo.select_articles(db, sort, topic=topic)
    logger.debug(
        "Listed %d article(s) topic=%r sort=%s %s",
        len(articles), topic, sort.column, sort.direction,
    )
    return articles


async def get_article(db: AsyncSession, raw_article_id: str) -> dict:
    """Return one article with its ``comment_count``."""
    article_id = parse_identifier(raw_article_id, field="article_id")

    article = await article_repo.select_article_by_id(db, article_id)
    if article is None:
        raise ApiError(ErrorKind.ARTICLE_NOT_FOUND, ARTICLE_ID_NOT_FOUND)
    return article
