"""
Outgoing mail over SMTP

`send_email` is blocking; `SmtpMailer` runs it in a worker thread so the
event loop keeps serving requests while the SMTP conversation happens.
"""
import asyncio
import logging
import secrets
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart

from jinja2 import Template

from hanuram.config import get_settings
from hanuram.exceptions import TransientError


settings = get_settings()
logger = logging.getLogger(__name__)

PIN_ALPHABET = "0123456789ABCDEF"


def generate_pin(length: int = 6) -> str:
    """Uppercase hex PIN, each character drawn uniformly"""
    return "".join(secrets.choice(PIN_ALPHABET) for _ in range(length))


def send_email(to_email: str, subject: str, html_content: str) -> bool:
    """
    Send one HTML message (blocking)
    """
    if not settings.smtp_user or not settings.smtp_password:
        logger.warning("Email service not configured, skipping send")
        return False

    try:
        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = f"{settings.email_from_name} <{settings.smtp_user}>"
        msg['To'] = to_email

        if settings.email_reply_to:
            msg['Reply-To'] = settings.email_reply_to

        msg.attach(MIMEText(html_content, 'html', 'utf-8'))

        smtp_host = settings.smtp_host
        smtp_port = settings.smtp_port
        timeout = settings.smtp_timeout_seconds

        if smtp_port == 465:
            server = smtplib.SMTP_SSL(smtp_host, smtp_port, timeout=timeout)
        else:
            server = smtplib.SMTP(smtp_host, smtp_port, timeout=timeout)
            server.ehlo()
            server.starttls()
            server.ehlo()

        with server:
            server.login(settings.smtp_user, settings.smtp_password)
            server.sendmail(settings.smtp_user, [to_email], msg.as_string())

        logger.info("Email sent successfully to %s", _sanitize_log_input(to_email))
        return True
    except Exception as e:
        # the exception text may carry SMTP credentials
        logger.error("Failed to send email to %s: %s", _sanitize_log_input(to_email), type(e).__name__)
        return False


def _sanitize_log_input(email: str) -> str:
    """Strip control characters before an address reaches the logs"""
    if not email:
        return "(empty)"
    return ''.join(char for char in email if char.isprintable())[:100]


RESET_PIN_TEMPLATE = Template("""
<div style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
    <h2 style="color: #007bff;">Password Reset Request{% if resent %} (Resent){% endif %}</h2>
    <p>Hello,</p>
    {% if resent %}
    <p>You have requested to resend your password reset PIN for your {{ site_name }} account.</p>
    <p>Your new verification PIN is: <strong style="font-size: 1.5em; color: #007bff;">{{ pin }}</strong></p>
    {% else %}
    <p>You have requested to reset your password for your {{ site_name }} account.</p>
    <p>Your verification PIN is: <strong style="font-size: 1.5em; color: #007bff;">{{ pin }}</strong></p>
    {% endif %}
    <p>This PIN is valid for {{ expire_minutes }} minutes. Please enter it on the password reset page to continue.</p>
    <p>If you did not request a password reset, please ignore this email.</p>
    <p>Thank you,<br>The {{ site_name }} Team</p>
</div>
""")


def render_reset_pin_email(pin: str, resent: bool = False) -> str:
    return RESET_PIN_TEMPLATE.render(
        pin=pin,
        resent=resent,
        site_name=settings.site_name,
        expire_minutes=settings.reset_pin_expire_minutes,
    )


class SmtpMailer:
    """Mailer used by the password reset flow"""

    async def send_reset_pin(self, to_email: str, pin: str, resent: bool = False) -> None:
        subject = f"{settings.site_name} - Password Reset Verification"
        if resent:
            subject += " (Resent)"
        html_content = render_reset_pin_email(pin, resent=resent)

        sent = await asyncio.to_thread(send_email, to_email, subject, html_content)
        if not sent:
            raise TransientError()
