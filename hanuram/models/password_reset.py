"""
Password reset PIN model
"""
import uuid
from datetime import datetime
from sqlalchemy import String, Boolean, DateTime, Index, text
from sqlalchemy.orm import Mapped, mapped_column
from hanuram.database import Base


class ResetToken(Base):
    """Password reset PIN table"""
    __tablename__ = "password_reset_tokens"
    __table_args__ = (
        # at most one unused PIN per email
        Index(
            "uq_password_reset_tokens_active_email",
            "email",
            unique=True,
            postgresql_where=text("used = false"),
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    email: Mapped[str] = mapped_column(String(255), index=True)
    pin: Mapped[str] = mapped_column(String(16))  # stored as issued, see ResetTokenStore
    expires_at: Mapped[datetime] = mapped_column(DateTime, index=True)
    used: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow
    )
