"""
Forgot-password request schemas

Fields are optional so that a missing value is answered with the flow's own
400 message instead of a generic validation error.
"""
from pydantic import AfterValidator, BaseModel, Field, field_validator
from typing import Annotated, Optional


def normalize_email(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip().lower()
    return cleaned or None


NormalizedEmail = Annotated[Optional[str], AfterValidator(normalize_email)]


class SendPinRequest(BaseModel):
    """send-email / resend-pin body"""
    email: NormalizedEmail = None


class VerifyPinRequest(BaseModel):
    email: NormalizedEmail = None
    pin: Optional[str] = None

    @field_validator("pin")
    @classmethod
    def strip_pin(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class SetNewPasswordRequest(BaseModel):
    email: NormalizedEmail = None
    new_password: Optional[str] = Field(default=None, alias="newPassword")

    class Config:
        populate_by_name = True
