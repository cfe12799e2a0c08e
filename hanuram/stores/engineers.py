"""
Engineer profile persistence
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hanuram.models.engineer import EngineerProfile
from hanuram.schemas.engineer import EngineerDetail
from hanuram.stores.base import persistence_guard


class EngineerStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    @persistence_guard
    async def get_by_engineer_id(self, engineer_id: str) -> Optional[EngineerProfile]:
        result = await self.db.execute(
            select(EngineerProfile).where(EngineerProfile.engineer_id == engineer_id)
        )
        return result.scalar_one_or_none()


async def fetch_engineer_detail(engineer_id: str) -> Optional[EngineerDetail]:
    """Profile cache fetcher: one short-lived session per miss"""
    from hanuram.database import AsyncSessionLocal

    async with AsyncSessionLocal() as session:
        profile = await EngineerStore(session).get_by_engineer_id(engineer_id)
        if profile is None:
            return None
        return EngineerDetail.model_validate(profile)
