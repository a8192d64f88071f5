"""
Fixed dataset loaded by ``scripts/seed.py`` and by the test suite.

Article and comment ids are given explicitly so that callers can refer
to them.  Summary of the shape:

- topic ``paper`` exists but has no articles;
- article 1 has three comments and 100 votes, article 2 has none;
- every other article starts at 0 votes.
"""
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from news_api.models import Article, Comment, Topic, User


def _ts(*parts: int) -> datetime:
    return datetime(*parts, tzinfo=timezone.utc)


TOPICS = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

USERS = [
    {
        "username": "butter_bridge",
        "name": "jonny",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    },
    {
        "username": "icellusedkars",
        "name": "sam",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4",
    },
    {
        "username": "rogersop",
        "name": "paul",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
    },
    {
        "username": "lurker",
        "name": "do_nothing",
        "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
    },
]

ARTICLES = [
    {
        "article_id": 1,
        "title": "Living in the shadow of a great man",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "I find this existence challenging",
        "votes": 100,
        "created_at": _ts(2020, 7, 9, 20, 11),
    },
    {
        "article_id": 2,
        "title": "Sony Vaio; or, The Laptop",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Call me Mitchell. Some years ago, never mind how long precisely.",
        "votes": 0,
        "created_at": _ts(2020, 10, 16, 5, 3),
    },
    {
        "article_id": 3,
        "title": "Eight pug gifs that remind me of mitch",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "some gifs",
        "votes": 0,
        "created_at": _ts(2020, 11, 3, 9, 12),
    },
    {
        "article_id": 4,
        "title": "Student SUES Mitch!",
        "topic": "mitch",
        "author": "rogersop",
        "body": "We all love Mitch and his wonderful, unique typing style.",
        "votes": 0,
        "created_at": _ts(2020, 5, 6, 1, 14),
    },
    {
        "article_id": 5,
        "title": "UNCOVERED: catspiracy to bring down democracy",
        "topic": "cats",
        "author": "rogersop",
        "body": "Bastet walks amongst us, and the cats are taking arms!",
        "votes": 0,
        "created_at": _ts(2020, 8, 3, 13, 14),
    },
    {
        "article_id": 6,
        "title": "A",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Delicious tin of cat food",
        "votes": 0,
        "created_at": _ts(2020, 10, 18, 1, 0),
    },
]

COMMENTS = [
    {
        "comment_id": 1,
        "article_id": 1,
        "author": "butter_bridge",
        "body": "Oh, I've got compassion running out of my nose, pal!",
        "votes": 16,
        "created_at": _ts(2020, 4, 6, 12, 17),
    },
    {
        "comment_id": 2,
        "article_id": 1,
        "author": "butter_bridge",
        "body": "The beautiful thing about treasure is that it exists.",
        "votes": 14,
        "created_at": _ts(2020, 10, 31, 3, 3),
    },
    {
        "comment_id": 3,
        "article_id": 1,
        "author": "icellusedkars",
        "body": "Replacing the quiet elegance of the dark suit and tie.",
        "votes": 100,
        "created_at": _ts(2020, 3, 1, 1, 13),
    },
    {
        "comment_id": 4,
        "article_id": 3,
        "author": "icellusedkars",
        "body": "git push origin master",
        "votes": 0,
        "created_at": _ts(2020, 6, 20, 7, 24),
    },
    {
        "comment_id": 5,
        "article_id": 5,
        "author": "icellusedkars",
        "body": "Fruit pastilles",
        "votes": 0,
        "created_at": _ts(2020, 6, 15, 10, 25),
    },
    {
        "comment_id": 6,
        "article_id": 5,
        "author": "butter_bridge",
        "body": "What do you see? I have no idea where this will lead us.",
        "votes": 16,
        "created_at": _ts(2020, 6, 9, 5, 0),
    },
]


async def load(session: AsyncSession) -> None:
    """Insert the whole dataset, parents first, and flush."""
    session.add_all(Topic(**t) for t in TOPICS)
    session.add_all(User(**u) for u in USERS)
    await session.flush()
    session.add_all(Article(**a) for a in ARTICLES)
    await session.flush()
    session.add_all(Comment(**c) for c in COMMENTS)
    await session.flush()
