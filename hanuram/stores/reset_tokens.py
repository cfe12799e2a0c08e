"""
Password reset token persistence
"""
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import select, update, delete, and_, text
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from hanuram.models.password_reset import ResetToken
from hanuram.stores.base import persistence_guard
from hanuram.utils.timezone import utc_now_naive


class ResetTokenStore:
    """
    PINs are kept in plaintext and matched by exact equality. Known gap:
    anyone with read access to the table can complete a pending reset.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    @persistence_guard
    async def replace_active(self, email: str, pin: str, expires_at: datetime) -> None:
        """Insert the unused token for `email`, overwriting the previous one in a single statement"""
        stmt = pg_insert(ResetToken).values(
            id=str(uuid.uuid4()),
            email=email,
            pin=pin,
            expires_at=expires_at,
            used=False,
            created_at=utc_now_naive(),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[ResetToken.email],
            # same predicate as uq_password_reset_tokens_active_email
            index_where=text("used = false"),
            set_={
                "id": stmt.excluded.id,
                "pin": stmt.excluded.pin,
                "expires_at": stmt.excluded.expires_at,
                "created_at": stmt.excluded.created_at,
            },
        )
        await self.db.execute(stmt)
        await self.db.commit()

    @persistence_guard
    async def find_unused(self, email: str, pin: str) -> Optional[ResetToken]:
        result = await self.db.execute(
            select(ResetToken).where(
                and_(
                    ResetToken.email == email,
                    ResetToken.pin == pin,
                    ResetToken.used.is_(False),
                )
            ).limit(1)
        )
        return result.scalar_one_or_none()

    @persistence_guard
    async def mark_used(self, token: ResetToken) -> bool:
        """Flip `used`; False when another request consumed the token first"""
        result = await self.db.execute(
            update(ResetToken)
            .where(and_(ResetToken.id == token.id, ResetToken.used.is_(False)))
            .values(used=True)
        )
        await self.db.commit()
        return result.rowcount == 1

    @persistence_guard
    async def delete(self, token: ResetToken) -> None:
        await self.db.execute(delete(ResetToken).where(ResetToken.id == token.id))
        await self.db.commit()

    @persistence_guard
    async def delete_all(self, email: str) -> int:
        result = await self.db.execute(delete(ResetToken).where(ResetToken.email == email))
        await self.db.commit()
        return result.rowcount

