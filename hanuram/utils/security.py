"""
Security helpers: password hashing, session login, metrics auth
"""
import logging
import secrets
from typing import Optional
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from hanuram.config import get_settings

settings = get_settings()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
metrics_security = HTTPBasic(auto_error=False)
logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its stored hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password for storage"""
    return pwd_context.hash(password)


def login_session(request: Request, user) -> None:
    request.session[SESSION_USER_KEY] = {
        "id": user.id,
        "name": user.name,
        "email": user.email,
    }


def get_session_user(request: Request) -> Optional[dict]:
    return request.session.get(SESSION_USER_KEY)


async def verify_metrics_basic_auth(
    credentials: Optional[HTTPBasicCredentials] = Depends(metrics_security),
) -> None:
    """
    Protect /metrics with HTTP basic auth when credentials are configured
    """
    if not settings.metrics_basic_auth_user:
        return

    valid = (
        credentials is not None
        and secrets.compare_digest(credentials.username, settings.metrics_basic_auth_user)
        and secrets.compare_digest(credentials.password, settings.metrics_basic_auth_password)
    )
    if not valid:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid metrics credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
