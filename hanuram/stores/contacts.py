"""
Contact form persistence
"""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hanuram.exceptions import ConflictError
from hanuram.models.contact import ContactSubmission
from hanuram.stores.base import persistence_guard


class ContactStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    @persistence_guard
    async def add(self, **fields) -> ContactSubmission:
        submission = ContactSubmission(**fields)
        self.db.add(submission)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError("A message from this email was already received.")
        await self.db.refresh(submission)
        return submission
