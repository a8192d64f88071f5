from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import NOT_FOUND, ErrorKind
from news_api.models import Comment
from news_api.queries import SortSpec
from news_api.repositories import row_to_dict, translate_datastore_errors

_COMMENT_COLUMNS = (
    Comment.comment_id,
    Comment.article_id,
    Comment.author,
    Comment.body,
    Comment.votes,
    Comment.created_at,
)

_SORT_COLUMNS = {
    "comment_id": Comment.comment_id,
    "votes": Comment.votes,
    "created_at": Comment.created_at,
    "author": Comment.author,
}


async def select_comments_by_article(
    db: AsyncSession, article_id: int, sort: SortSpec
) -> list[dict]:
    """Return every comment on *article_id* in the requested order."""
    column = _SORT_COLUMNS[sort.column]
    stmt = (
        select(*_COMMENT_COLUMNS)
        .where(Comment.article_id == article_id)
        .order_by(
            column.desc() if sort.descending else column.asc(),
            Comment.comment_id.asc(),
        )
    )
    result = await db.execute(stmt)
    return [row_to_dict(row) for row in result.mappings().all()]


async def insert_comment(db: AsyncSession, article_id: int, author: str, body: str) -> dict:
    """
    Insert a comment and return it with its server-assigned fields.

    A foreign key violation (the parent article vanished between the
    caller's existence check and the insert) is reported as
    ``ArticleNotFound``.
    """
    stmt = (
        insert(Comment)
        .values(article_id=article_id, author=author, body=body, votes=0)
        .returning(*_COMMENT_COLUMNS)
    )
    with translate_datastore_errors(
        foreign_key=ErrorKind.ARTICLE_NOT_FOUND, foreign_key_msg=NOT_FOUND
    ):
        result = await db.execute(stmt)
    return row_to_dict(result.mappings().one())


async def increment_votes(db: AsyncSession, comment_id: int, inc_votes: int) -> dict | None:
    """Atomically add *inc_votes* to the comment's votes; None if it does not exist."""
    stmt = (
        update(Comment)
        .where(Comment.comment_id == comment_id)
        .values(votes=Comment.votes + inc_votes)
        .returning(*_COMMENT_COLUMNS)
        .execution_options(synchronize_session=False)
    )
    with translate_datastore_errors():
        result = await db.execute(stmt)
    row = result.mappings().one_or_none()
    return row_to_dict(row) if row is not None else None


async def delete_comment(db: AsyncSession, comment_id: int) -> bool:
    """Hard-delete the comment.  Returns False when no row matched."""
    stmt = (
        delete(Comment)
        .where(Comment.comment_id == comment_id)
        .returning(Comment.comment_id)
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none() is not None
