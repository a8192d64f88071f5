from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from news_api.config import settings
from news_api.database import get_db
from news_api.dependencies import SortParams
from news_api.schemas import (
    ArticleDetailEnvelope,
    ArticleEnvelope,
    ArticleList,
    CommentCreate,
    CommentEnvelope,
    CommentList,
    VoteUpdate,
)
from news_api.services import article_service, comment_service, vote_service

router = APIRouter(prefix=f"{settings.API_PREFIX}/articles", tags=["articles"])

@router.get("", response_model=ArticleList)
async def list_articles(
    sorting: SortParams = Depends(),
    topic: str | None = Query(None, description="Only articles in this topic."),
    db: AsyncSession = Depends(get_db),
):
    articles = await article_service.list_articles(
        db, topic=topic, sort_by=sorting.sort_by, order=sorting.order
    )
    return {"articles": articles}

@router.get("/{article_id}", response_model=ArticleDetailEnvelope)
async def get_article(article_id: str, db: AsyncSession = Depends(get_db)):
    return {"article": await article_service.get_article(db, article_id)}

@router.patch("/{article_id}", response_model=ArticleEnvelope)
async def update_article_votes(
    article_id: str,
    data: VoteUpdate | None = None,
    db: AsyncSession = Depends(get_db),
):
    inc_votes = data.inc_votes if data is not None else None
    return {"article": await vote_service.increment_article_votes(db, article_id, inc_votes)}

@router.get("/{article_id}/comments", response_model=CommentList)
async def list_comments(
    article_id: str,
    sorting: SortParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    comments = await comment_service.list_comments(
        db, article_id, sort_by=sorting.sort_by, order=sorting.order
    )
    return {"comments": comments}

@router.post("/{article_id}/comments", status_code=201, response_model=CommentEnvelope)
async def add_comment(
    article_id: str,
    data: CommentCreate | None = None,
    db: AsyncSession = Depends(get_db),
):
    return {"comment": await comment_service.create_comment(db, article_id, data)}
