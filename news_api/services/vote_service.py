"""
Vote service: increments for article and comment vote counters.

Both the identifier and the increment are parsed before the datastore
is touched.  The update itself is a single atomic statement in the
repository layer; there is no read-modify-write here.  A missing
increment is a no-op that still returns the current row.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import ARTICLE_WITH_ID_NOT_FOUND, ApiError, ErrorKind
from news_api.queries import parse_identifier, parse_increment
from news_api.repositories import articles as article_repo
from news_api.repositories import comments as comment_repo

logger = logging.getLogger(__name__)


async def increment_article_votes(db: AsyncSession, raw_article_id: str, inc_votes=None) -> dict:
    article_id = parse_identifier(raw_article_id, field="article_id")
    increment = parse_increment(inc_votes)

    article = await article_repo.increment_votes(db, article_id, increment)
    if article is None:
        raise ApiError(
            ErrorKind.ARTICLE_NOT_FOUND,
            ARTICLE_WITH_ID_NOT_FOUND.format(article_id=article_id),
        )
    logger.debug("Article %d votes %+d -> %d", article_id, increment, article["votes"])
    return article


async def increment_comment_votes(db: AsyncSession, raw_comment_id: str, inc_votes=None) -> dict:
    comment_id = parse_identifier(raw_comment_id, field="comment_id")
    increment = parse_increment(inc_votes)

    comment = await comment_repo.increment_votes(db, comment_id, increment)
    if comment is None:
        raise ApiError(ErrorKind.COMMENT_NOT_FOUND)
    logger.debug("Comment %d votes %+d -> %d", comment_id, increment, comment["votes"])
    return comment
