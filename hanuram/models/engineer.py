"""
Engineer profile model

Rows are maintained by the site administrators; the web app only reads them.
"""
import uuid
from typing import Any, Dict, List
from sqlalchemy import String, Integer, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column
from hanuram.database import Base


class EngineerProfile(Base):
    """Engineer detail pages"""
    __tablename__ = "engineer_profiles"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    engineer_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(100))
    profile_picture_url: Mapped[str] = mapped_column(String(500), nullable=True)
    specialization: Mapped[str] = mapped_column(String(100))
    experience: Mapped[int] = mapped_column(Integer, nullable=True)  # years
    location: Mapped[str] = mapped_column(String(200), nullable=True)
    contact: Mapped[Dict[str, Any]] = mapped_column(JSON, default=dict)  # {phone, email}
    bio: Mapped[str] = mapped_column(Text, nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=True)
    qualifications: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, default=list)
    project_highlights: Mapped[List[str]] = mapped_column(JSON, default=list)
    videos: Mapped[List[str]] = mapped_column(JSON, default=list)
    services_offered: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, default=list)
