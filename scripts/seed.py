"""Database seeder for local development."""
import asyncio
import argparse
import random
import time
from datetime import datetime, timezone, timedelta
from sqlalchemy import func, select
from news_api import seed_data
from news_api.cache import cache
from news_api.database import engine, async_session, Base
from news_api.models import Article, Comment

_SERIAL_COLUMNS = (
    ("articles", "article_id", Article.article_id),
    ("comments", "comment_id", Comment.comment_id),
)

async def _advance_sequences(session):
    """Move Postgres id sequences past the ids the fixed dataset inserted explicitly."""
    if engine.dialect.name != "postgresql":
        return
    for table, column, attr in _SERIAL_COLUMNS:
        max_id = await session.scalar(select(func.max(attr)))
        await session.execute(
            select(func.setval(func.pg_get_serial_sequence(table, column), max_id))
        )

async def seed(extra_articles: int = 0):
    print(f"Seeding: fixed dataset + {extra_articles} generated article(s)")
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        await seed_data.load(session)
        print(f"  Loaded {len(seed_data.TOPICS)} topics, {len(seed_data.USERS)} users, "
              f"{len(seed_data.ARTICLES)} articles, {len(seed_data.COMMENTS)} comments")
        await _advance_sequences(session)

        topics = [t["slug"] for t in seed_data.TOPICS]
        usernames = [u["username"] for u in seed_data.USERS]
        total_comments = 0
        for i in range(extra_articles):
            created = datetime.now(timezone.utc) - timedelta(days=random.randint(0, 365))
            topic = random.choice(topics)
            article = Article(
                title=f"Generated article {i} about {topic}",
                topic=topic,
                author=random.choice(usernames),
                body=f"This is the body of generated article {i}. " * 10,
                votes=random.randint(-20, 200),
                created_at=created,
            )
            session.add(article)
            await session.flush()

            for _ in range(random.randint(0, 5)):
                session.add(Comment(
                    article_id=article.article_id,
                    author=random.choice(usernames),
                    body=f"Comment on generated article {i}.",
                    votes=random.randint(-5, 50),
                    created_at=created + timedelta(hours=random.randint(1, 72)),
                ))
                total_comments += 1
        await session.flush()
        await session.commit()

    await cache.connect()
    await cache.invalidate_reference_data()
    await cache.disconnect()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Generated articles: {extra_articles}")
    print(f"  Generated comments: {total_comments}")


def main():
    parser = argparse.ArgumentParser(description="Seed the news database")
    parser.add_argument(
        "--extra-articles", type=int, default=0,
        help="Number of random articles (with comments) to add on top of the fixed dataset",
    )
    args = parser.parse_args()
    asyncio.run(seed(extra_articles=args.extra_articles))


if __name__ == "__main__":
    main()
