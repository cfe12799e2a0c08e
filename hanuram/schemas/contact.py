"""
Contact form schema
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Literal


class ContactRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(min_length=5, max_length=32)
    address: str = Field(min_length=1, max_length=500)
    contact_preference: Literal["Call me", "Email me"] = Field(alias="contactPreference")
    requirement_type: Literal[
        "Supervision and Management",
        "Flat/Bungalow in HR Society",
        "Renovated Bungalow/Flat (HR)",
    ] = Field(alias="requirementType")
    details_checked: bool = Field(alias="detailsChecked")

    class Config:
        populate_by_name = True
