"""
User service: read-only access to users.

Users are pre-seeded and never written through the API, so both the
list and single-user lookups go through the Redis cache.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.cache import USERS_KEY, cache, user_key
from news_api.config import settings
from news_api.errors import ApiError, ErrorKind
from news_api.repositories import users as user_repo


async def get_users(db: AsyncSession) -> list[dict]:
    """Return all users ordered by username."""
    cached = await cache.get(USERS_KEY)
    if cached is not None:
        return cached

    users = await user_repo.select_users(db)
    await cache.set(USERS_KEY, users, ttl=settings.CACHE_TTL_REFERENCE)
    return users


async def get_user(db: AsyncSession, username: str) -> dict:
    """Return the user with *username*; raises ``UserNotFound`` otherwise."""
    key = user_key(username)
    cached = await cache.get(key)
    if cached is not None:
        return cached

    user = await user_repo.select_user_by_username(db, username)
    if user is None:
        raise ApiError(ErrorKind.USER_NOT_FOUND, field="username")

    await cache.set(key, user, ttl=settings.CACHE_TTL_REFERENCE)
    return user
