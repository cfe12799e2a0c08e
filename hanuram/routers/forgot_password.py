"""
Forgot-password routes: send PIN, verify PIN, resend PIN, set new password
"""
from fastapi import APIRouter, Depends, Request

from hanuram.config import get_settings
from hanuram.dependencies import get_reset_manager
from hanuram.schemas.common import MessageResponse
from hanuram.schemas.forgot_password import (
    SendPinRequest,
    SetNewPasswordRequest,
    VerifyPinRequest,
)
from hanuram.services.password_reset import PinResetManager
from hanuram.utils.rate_limiter import RateLimiter

router = APIRouter()
settings = get_settings()

# send-email and resend-pin share one window per IP under both prefixes
send_pin_limiter = RateLimiter(
    times=settings.reset_email_rate_limit,
    seconds=settings.reset_email_rate_window_seconds,
    scope="reset-pin",
)


@router.post("/send-email", response_model=MessageResponse, dependencies=[Depends(send_pin_limiter)])
async def send_email(
    data: SendPinRequest,
    manager: PinResetManager = Depends(get_reset_manager),
):
    """Mail a verification PIN"""
    message = await manager.issue(data.email)
    return MessageResponse(message=message)


@router.post("/verify-pin", response_model=MessageResponse)
async def verify_pin(
    data: VerifyPinRequest,
    request: Request,
    manager: PinResetManager = Depends(get_reset_manager),
):
    """Check the PIN and remember the verified email in the session"""
    message = await manager.verify(data.email, data.pin, request.session)
    return MessageResponse(message=message)


@router.post("/resend-pin", response_model=MessageResponse, dependencies=[Depends(send_pin_limiter)])
async def resend_pin(
    data: SendPinRequest,
    manager: PinResetManager = Depends(get_reset_manager),
):
    """Replace the pending PIN with a new one"""
    message = await manager.resend(data.email)
    return MessageResponse(message=message)


@router.post("/set-new-password", response_model=MessageResponse)
async def set_new_password(
    data: SetNewPasswordRequest,
    request: Request,
    manager: PinResetManager = Depends(get_reset_manager),
):
    """Finish the reset for the email verified in this session"""
    message = await manager.complete_reset(data.email, data.new_password, request.session)
    return MessageResponse(message=message)
