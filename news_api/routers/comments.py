from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from news_api.config import settings
from news_api.database import get_db
from news_api.schemas import CommentEnvelope, VoteUpdate
from news_api.services import comment_service, vote_service

router = APIRouter(prefix=f"{settings.API_PREFIX}/comments", tags=["comments"])

@router.patch("/{comment_id}", response_model=CommentEnvelope)
async def update_comment_votes(
    comment_id: str,
    data: VoteUpdate | None = None,
    db: AsyncSession = Depends(get_db),
):
    inc_votes = data.inc_votes if data is not None else None
    return {"comment": await vote_service.increment_comment_votes(db, comment_id, inc_votes)}

@router.delete("/{comment_id}", status_code=204, response_class=Response)
async def delete_comment(comment_id: str, db: AsyncSession = Depends(get_db)):
    await comment_service.delete_comment(db, comment_id)
    return Response(status_code=204)
