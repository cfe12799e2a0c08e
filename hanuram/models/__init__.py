"""
Database models
"""
from hanuram.models.user import User
from hanuram.models.contact import ContactSubmission
from hanuram.models.password_reset import ResetToken
from hanuram.models.engineer import EngineerProfile

__all__ = [
    "User",
    "ContactSubmission",
    "ResetToken",
    "EngineerProfile",
]
