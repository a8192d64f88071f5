from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.models import User


def _user_to_dict(user: User) -> dict:
    return {
        "username": user.username,
        "name": user.name,
        "avatar_url": user.avatar_url,
    }


async def select_users(db: AsyncSession) -> list[dict]:
    result = await db.execute(select(User).order_by(User.username))
    return [_user_to_dict(u) for u in result.scalars().all()]


async def select_user_by_username(db: AsyncSession, username: str) -> dict | None:
    """Return the user dict for *username*, or None when there is no such user."""
    user = await db.get(User, username)
    return _user_to_dict(user) if user is not None else None


async def user_exists(db: AsyncSession, username: str) -> bool:
    return bool(await db.scalar(select(exists().where(User.username == username))))
