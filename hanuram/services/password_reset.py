"""
Password reset by e-mailed PIN

Per email the flow moves NoActiveToken -> Issued -> Verified -> Consumed.
Reissuing replaces the active PIN, an expired PIN counts as no PIN at all,
and completing the reset purges every token for the address.

Account existence is never revealed: issuing for an unknown address answers
exactly like issuing for a known one.
"""
import logging
from datetime import timedelta
from typing import MutableMapping, Optional

from hanuram.exceptions import (
    FieldRequiredError,
    InvalidOrExpiredError,
    NotFoundError,
    TransientError,
    UnauthorizedError,
)
from hanuram.services.email_service import generate_pin
from hanuram.utils.metrics import RESET_PIN_EVENTS
from hanuram.utils.security import get_password_hash
from hanuram.utils.timezone import Clock, utc_now_naive

logger = logging.getLogger(__name__)

SESSION_RESET_EMAIL_KEY = "reset_email"

ISSUE_MESSAGE = "If an account with that email exists, a verification PIN has been sent."
RESEND_MESSAGE = "If an account with that email exists, a new verification PIN has been sent."
VERIFIED_MESSAGE = "PIN verified successfully!"
RESET_DONE_MESSAGE = "Password updated successfully! You can now log in with your new password."


class PinResetManager:
    """
    Owns the reset token lifecycle.

    Args:
        users: store with `get_by_email` and `set_password`
        tokens: store with `replace_active`, `find_unused`, `mark_used`,
            `delete` and `delete_all`
        mailer: object with an awaitable `send_reset_pin(email, pin, resent)`
        clock: returns naive UTC "now"
        pin_length: characters per PIN
        pin_ttl: lifetime of an issued PIN
        password_min_length: shortest accepted new password
    """

    def __init__(
        self,
        users,
        tokens,
        mailer,
        clock: Clock = utc_now_naive,
        pin_length: int = 6,
        pin_ttl: timedelta = timedelta(minutes=15),
        password_min_length: int = 6,
    ):
        self.users = users
        self.tokens = tokens
        self.mailer = mailer
        self.clock = clock
        self.pin_length = pin_length
        self.pin_ttl = pin_ttl
        self.password_min_length = password_min_length

    async def issue(self, email: Optional[str]) -> str:
        """Send a fresh PIN to `email` if it belongs to an account"""
        await self._issue(email, resent=False)
        return ISSUE_MESSAGE

    async def resend(self, email: Optional[str]) -> str:
        """Discard the pending PIN and mail a new one"""
        await self._issue(email, resent=True)
        return RESEND_MESSAGE

    async def _issue(self, email: Optional[str], resent: bool) -> None:
        if not email:
            raise FieldRequiredError("Email is required.")

        user = await self.users.get_by_email(email)
        if user is None:
            logger.info("Reset PIN requested for unknown account")
            RESET_PIN_EVENTS.labels("unknown_account").inc()
            return

        pin = generate_pin(self.pin_length)
        expires_at = self.clock() + self.pin_ttl
        await self.tokens.replace_active(email, pin, expires_at)
        RESET_PIN_EVENTS.labels("resent" if resent else "issued").inc()

        try:
            await self.mailer.send_reset_pin(email, pin, resent=resent)
        except TransientError:
            RESET_PIN_EVENTS.labels("mail_failed").inc()
            logger.error("Reset PIN email could not be delivered")
            raise
        except Exception as exc:
            RESET_PIN_EVENTS.labels("mail_failed").inc()
            logger.error("Reset PIN email could not be delivered", exc_info=True)
            raise TransientError() from exc

    async def verify(
        self,
        email: Optional[str],
        pin: Optional[str],
        session: MutableMapping,
    ) -> str:
        """
        Consume the PIN and mark `email` as verified in `session`.

        Fails with `InvalidOrExpiredError` when no unused PIN matches, when
        the PIN has expired (the token is deleted), or when a concurrent
        request consumed it first.
        """
        if not email or not pin:
            raise FieldRequiredError("Email and PIN are required.")

        token = await self.tokens.find_unused(email, pin)
        if token is None:
            RESET_PIN_EVENTS.labels("verify_failed").inc()
            raise InvalidOrExpiredError()

        if token.expires_at < self.clock():
            await self.tokens.delete(token)
            RESET_PIN_EVENTS.labels("expired").inc()
            raise InvalidOrExpiredError()

        if not await self.tokens.mark_used(token):
            RESET_PIN_EVENTS.labels("verify_failed").inc()
            raise InvalidOrExpiredError()

        session[SESSION_RESET_EMAIL_KEY] = email
        RESET_PIN_EVENTS.labels("verified").inc()
        return VERIFIED_MESSAGE

    async def complete_reset(
        self,
        email: Optional[str],
        new_password: Optional[str],
        session: MutableMapping,
    ) -> str:
        """Store the new password for a session that verified `email`"""
        verified_email = session.get(SESSION_RESET_EMAIL_KEY)
        if not verified_email or verified_email != email:
            raise UnauthorizedError()

        if not new_password:
            raise FieldRequiredError("New password is required.")
        if len(new_password) < self.password_min_length:
            raise FieldRequiredError(
                f"Password must be at least {self.password_min_length} characters long."
            )

        user = await self.users.get_by_email(email)
        if user is None:
            raise NotFoundError("User not found.")

        await self.users.set_password(user, get_password_hash(new_password))
        purged = await self.tokens.delete_all(email)
        session.pop(SESSION_RESET_EMAIL_KEY, None)

        logger.info("Password reset completed, %s token(s) purged", purged)
        RESET_PIN_EVENTS.labels("completed").inc()
        return RESET_DONE_MESSAGE
