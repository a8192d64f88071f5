from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.models import Topic


def _topic_to_dict(topic: Topic) -> dict:
    return {"slug": topic.slug, "description": topic.description}


async def select_topics(db: AsyncSession) -> list[dict]:
    result = await db.execute(select(Topic).order_by(Topic.slug))
    return [_topic_to_dict(t) for t in result.scalars().all()]


async def topic_exists(db: AsyncSession, slug: str) -> bool:
    return bool(await db.scalar(select(exists().where(Topic.slug == slug))))
