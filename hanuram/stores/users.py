"""
User account persistence
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hanuram.exceptions import ConflictError
from hanuram.models.user import User
from hanuram.stores.base import persistence_guard


class UserStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    @persistence_guard
    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    @persistence_guard
    async def create(self, name: str, email: str, password_hash: str) -> User:
        user = User(name=name, email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError("Email already registered. Please login or use a different email.")
        await self.db.refresh(user)
        return user

    @persistence_guard
    async def set_password(self, user: User, password_hash: str) -> None:
        user.password_hash = password_hash
        await self.db.commit()
