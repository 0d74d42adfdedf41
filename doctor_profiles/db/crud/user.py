# doctor_profiles/db/crud/user.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional

from doctor_profiles.db.models.user import UserModel


async def get_user(db: AsyncSession, user_id: str) -> Optional[UserModel]:
    """
    Get a user account by ID.

    Args:
        db: Database session
        user_id: User ID

    Returns:
        UserModel or None if not found
    """
    result = await db.execute(select(UserModel).where(UserModel.id == user_id))
    return result.scalar_one_or_none()
