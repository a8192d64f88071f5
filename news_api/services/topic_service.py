from sqlalchemy.ext.asyncio import AsyncSession

from news_api.cache import TOPICS_KEY, cache
from news_api.config import settings
from news_api.repositories import topics as topic_repo


async def get_topics(db: AsyncSession) -> list[dict]:
    """Return all topics, through the cache."""
    cached = await cache.get(TOPICS_KEY)
    if cached is not None:
        return cached

    topics = await topic_repo.select_topics(db)
    await cache.set(TOPICS_KEY, topics, ttl=settings.CACHE_TTL_REFERENCE)
    return topics
