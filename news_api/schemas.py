from typing import Any

from pydantic import BaseModel, ConfigDict
from datetime import datetime


# --- Topic ---

class TopicResponse(BaseModel):
    slug: str
    description: str
    model_config = ConfigDict(from_attributes=True)


class TopicList(BaseModel):
    topics: list[TopicResponse]


# --- User ---

class UserResponse(BaseModel):
    username: str
    name: str
    avatar_url: str | None = None
    model_config = ConfigDict(from_attributes=True)


class UserList(BaseModel):
    users: list[UserResponse]


class UserEnvelope(BaseModel):
    user: UserResponse


# --- Article ---

class ArticleResponse(BaseModel):
    article_id: int
    title: str
    topic: str
    author: str
    body: str
    votes: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ArticleWithCount(ArticleResponse):
    comment_count: int


class ArticleList(BaseModel):
    articles: list[ArticleWithCount]


class ArticleDetailEnvelope(BaseModel):
    article: ArticleWithCount


class ArticleEnvelope(BaseModel):
    article: ArticleResponse


# --- Comment ---

class CommentCreate(BaseModel):
    # Presence is checked by comment_service (MissingField).
    body: str | None = None
    username: str | None = None


class CommentResponse(BaseModel):
    comment_id: int
    article_id: int
    author: str
    body: str
    votes: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CommentList(BaseModel):
    comments: list[CommentResponse]


class CommentEnvelope(BaseModel):
    comment: CommentResponse


# --- Votes ---

class VoteUpdate(BaseModel):
    # Parsed by news_api.queries.parse_increment, which accepts numeric strings.
    inc_votes: Any = None


# --- Index ---

class ApiIndex(BaseModel):
    ok: bool
    endpoints: dict[str, list[str]]
