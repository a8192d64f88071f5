from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from news_api.config import settings
from news_api.database import get_db
from news_api.schemas import TopicList
from news_api.services import topic_service

router = APIRouter(prefix=f"{settings.API_PREFIX}/topics", tags=["topics"])

@router.get("", response_model=TopicList)
async def list_topics(db: AsyncSession = Depends(get_db)):
    return {"topics": await topic_service.get_topics(db)}
