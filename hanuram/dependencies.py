"""
FastAPI dependency providers for the service objects
"""
from datetime import timedelta
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hanuram.config import get_settings
from hanuram.database import get_db
from hanuram.services.email_service import SmtpMailer
from hanuram.services.engineer_directory import EngineerDirectory
from hanuram.services.password_reset import PinResetManager
from hanuram.services.profile_cache import ProfileCache
from hanuram.stores import ContactStore, ResetTokenStore, UserStore, fetch_engineer_detail


def get_user_store(db: AsyncSession = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_contact_store(db: AsyncSession = Depends(get_db)) -> ContactStore:
    return ContactStore(db)


def get_reset_manager(db: AsyncSession = Depends(get_db)) -> PinResetManager:
    settings = get_settings()
    return PinResetManager(
        users=UserStore(db),
        tokens=ResetTokenStore(db),
        mailer=SmtpMailer(),
        pin_length=settings.reset_pin_length,
        pin_ttl=timedelta(minutes=settings.reset_pin_expire_minutes),
        password_min_length=settings.password_min_length,
    )


@lru_cache()
def get_profile_cache() -> ProfileCache:
    """Process-wide engineer detail cache"""
    return ProfileCache(
        fetcher=fetch_engineer_detail,
        ttl=timedelta(seconds=get_settings().engineer_cache_ttl_seconds),
        maxsize=get_settings().engineer_cache_max_entries,
    )


@lru_cache()
def get_engineer_directory() -> EngineerDirectory:
    return EngineerDirectory.from_file(get_settings().engineers_data_path or None)
