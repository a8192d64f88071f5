"""
Article reads and vote updates.

``comment_count`` is never stored.  Every read that exposes it joins
``comments`` and counts them in the same statement, so the value is
always the live number of comments referencing the article.
"""
from sqlalchemy import exists, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.models import Article, Comment
from news_api.queries import SortSpec
from news_api.repositories import row_to_dict, translate_datastore_errors

_ARTICLE_COLUMNS = (
    Article.article_id,
    Article.title,
    Article.topic,
    Article.author,
    Article.body,
    Article.votes,
    Article.created_at,
)

# Whitelisted sort names -> column expressions (comment_count is added per query).
_SORT_COLUMNS = {
    "article_id": Article.article_id,
    "title": Article.title,
    "topic": Article.topic,
    "author": Article.author,
    "created_at": Article.created_at,
    "votes": Article.votes,
}


def _select_with_comment_count():
    """
    Return ``(statement, comment_count)`` selecting every article column
    plus the per-article comment count.

    The outer join keeps articles without comments (count 0).
    """
    comment_count = func.count(Comment.comment_id).label("comment_count")
    stmt = (
        select(*_ARTICLE_COLUMNS, comment_count)
        .outerjoin(Comment, Comment.article_id == Article.article_id)
        .group_by(Article.article_id)
    )
    return stmt, comment_count


def _order_by(sort: SortSpec, comment_count):
    column = comment_count if sort.column == "comment_count" else _SORT_COLUMNS[sort.column]
    primary = column.desc() if sort.descending else column.asc()
    # article_id ASC makes ties deterministic.
    return primary, Article.article_id.asc()


async def select_articles(
    db: AsyncSession, sort: SortSpec, topic: str | None = None
) -> list[dict]:
    """Return articles with their comment counts, optionally for one topic."""
    stmt, comment_count = _select_with_comment_count()
    if topic is not None:
        stmt = stmt.where(Article.topic == topic)
    stmt = stmt.order_by(*_order_by(sort, comment_count))

    result = await db.execute(stmt)
    return [row_to_dict(row) for row in result.mappings().all()]


async def select_article_by_id(db: AsyncSession, article_id: int) -> dict | None:
    """Return one article with its comment count, or None when it does not exist."""
    stmt, _ = _select_with_comment_count()
    result = await db.execute(stmt.where(Article.article_id == article_id))
    row = result.mappings().one_or_none()
    return row_to_dict(row) if row is not None else None


async def article_exists(db: AsyncSession, article_id: int) -> bool:
    return bool(await db.scalar(select(exists().where(Article.article_id == article_id))))


async def increment_votes(db: AsyncSession, article_id: int, inc_votes: int) -> dict | None:
    """
    Add *inc_votes* to the article's votes and return the updated row.

    The addition happens inside a single ``UPDATE ... SET votes = votes + n``
    so concurrent increments on the same row serialise in the datastore
    and none is lost.  Returns None when no article has *article_id*.
    """
    stmt = (
        update(Article)
        .where(Article.article_id == article_id)
        .values(votes=Article.votes + inc_votes)
        .returning(*_ARTICLE_COLUMNS)
        .execution_options(synchronize_session=False)
    )
    with translate_datastore_errors():
        result = await db.execute(stmt)
    row = result.mappings().one_or_none()
    return row_to_dict(row) if row is not None else None
