"""
Account routes: registration, login, logout, session status
"""
import logging

from fastapi import APIRouter, Depends, Request, status

from hanuram.config import get_settings
from hanuram.dependencies import get_user_store
from hanuram.exceptions import AppError, FieldRequiredError
from hanuram.schemas.common import MessageResponse
from hanuram.schemas.user import CreateAccountRequest, LoginRequest, SessionUser, UserStatusResponse
from hanuram.stores import UserStore
from hanuram.utils.security import (
    get_password_hash,
    get_session_user,
    login_session,
    verify_password,
)

router = APIRouter()
api_router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password."


def validate_password_strength(password: str) -> None:
    if len(password) < settings.password_min_length:
        raise FieldRequiredError(
            f"Password must be at least {settings.password_min_length} characters long."
        )


@router.post("/createaccount", response_model=SessionUser, status_code=status.HTTP_201_CREATED)
async def create_account(
    data: CreateAccountRequest,
    request: Request,
    users: UserStore = Depends(get_user_store),
):
    """Register and log the new user in"""
    if not data.name or not data.email or not data.password:
        raise FieldRequiredError("All fields are required to create an account.")
    validate_password_strength(data.password)

    user = await users.create(
        name=data.name,
        email=data.email,
        password_hash=get_password_hash(data.password),
    )
    login_session(request, user)
    logger.info("New user account created")
    return SessionUser(id=user.id, name=user.name, email=user.email)


@router.post("/login", response_model=SessionUser)
async def login(
    data: LoginRequest,
    request: Request,
    users: UserStore = Depends(get_user_store),
):
    if not data.email or not data.password:
        raise FieldRequiredError("Email and password are required for login.")

    user = await users.get_by_email(data.email)
    if user is None or not verify_password(data.password, user.password_hash):
        raise InvalidCredentialsError()

    login_session(request, user)
    return SessionUser(id=user.id, name=user.name, email=user.email)


@api_router.get("/user-status", response_model=UserStatusResponse)
async def user_status(request: Request):
    """Whether the browser session belongs to a logged-in user"""
    user = get_session_user(request)
    if user:
        return UserStatusResponse(loggedIn=True, name=user.get("name"))
    return UserStatusResponse(loggedIn=False)


@api_router.post("/logout", response_model=MessageResponse)
async def logout(request: Request):
    request.session.clear()
    return MessageResponse(message="Logged out successfully!")
