from fastapi import APIRouter

from news_api.config import settings
from news_api.routing import endpoints_index
from news_api.schemas import ApiIndex

router = APIRouter(prefix=settings.API_PREFIX, tags=["index"])


@router.get("", response_model=ApiIndex)
async def api_index():
    return {"ok": True, "endpoints": endpoints_index()}
