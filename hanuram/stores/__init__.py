"""
Persistence adapters over the SQLAlchemy session
"""
from hanuram.stores.users import UserStore
from hanuram.stores.contacts import ContactStore
from hanuram.stores.reset_tokens import ResetTokenStore
from hanuram.stores.engineers import EngineerStore, fetch_engineer_detail

__all__ = [
    "UserStore",
    "ContactStore",
    "ResetTokenStore",
    "EngineerStore",
    "fetch_engineer_detail",
]
