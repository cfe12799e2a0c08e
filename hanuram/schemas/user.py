"""
Account schemas
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from hanuram.schemas.forgot_password import NormalizedEmail


class CreateAccountRequest(BaseModel):
    """Registration form"""
    name: Optional[str] = Field(default=None, max_length=100)
    email: NormalizedEmail = None
    password: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        cleaned = value.strip()
        if not cleaned:
            return None
        if "<" in cleaned or ">" in cleaned:
            raise ValueError("Name contains invalid characters")
        return cleaned


class LoginRequest(BaseModel):
    email: NormalizedEmail = None
    password: Optional[str] = None


class SessionUser(BaseModel):
    id: str
    name: str
    email: str


class UserStatusResponse(BaseModel):
    loggedIn: bool
    name: Optional[str] = None
