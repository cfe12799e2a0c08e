"""
Engineer schemas
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class ContactInfo(BaseModel):
    phone: Optional[str] = None
    email: Optional[str] = None


class Qualification(BaseModel):
    degree: Optional[str] = None
    university: Optional[str] = None


class ServiceOffered(BaseModel):
    service: Optional[str] = None
    price: Optional[float] = None
    time_required: Optional[str] = Field(default=None, alias="timeRequired")

    class Config:
        populate_by_name = True


class EngineerDetail(BaseModel):
    """Snapshot of one engineer profile row"""
    engineer_id: str
    name: str
    profile_picture_url: Optional[str] = None
    specialization: str
    experience: Optional[int] = None
    location: Optional[str] = None
    contact: ContactInfo = Field(default_factory=ContactInfo)
    bio: Optional[str] = None
    description: Optional[str] = None
    qualifications: List[Qualification] = Field(default_factory=list)
    project_highlights: List[str] = Field(default_factory=list)
    videos: List[str] = Field(default_factory=list)
    services_offered: List[ServiceOffered] = Field(default_factory=list)

    class Config:
        from_attributes = True
        frozen = True


class EngineerSummary(BaseModel):
    """Card shown on the engineers listing"""
    id: str
    name: str
    specialization: str
    experience: Optional[int] = None
    img: Optional[str] = None
