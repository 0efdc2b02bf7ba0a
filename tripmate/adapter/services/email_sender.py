"""
Verification email delivery.

ResendEmailSender talks to the Resend API; LoggingEmailSender is the
development backend and only records that an email would have gone out.
"""

import asyncio
import logging
from html import escape

import resend

from tripmate.app.services.email_sender import IEmailSender
from tripmate.domain.errors import ErrorCode
from tripmate.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

VERIFICATION_SUBJECT = "Activate your Tripmate account"

VERIFICATION_HTML = """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
    <h2 style="color: #111827;">Welcome to Tripmate</h2>
    <p>Confirm your email address by submitting the verification token below.</p>
    <hr>
    <p><b>Verification token:</b> {token}</p>
    <hr>
    <p>Once verified, sign in with this initial password:</p>
    <hr>
    <p><b>Initial password:</b> {password}</p>
    <hr>
    <p>Please change the password after your first login.</p>
    <p>The token expires in {ttl_minutes} minutes. If it expires, simply sign up again.</p>
    <p style="color: #6b7280; font-size: 12px;">If you did not request this, ignore this email.</p>
</div>
"""


def render_verification_email(raw_token: str, raw_password: str, ttl_minutes: int) -> str:
    return VERIFICATION_HTML.format(
        token=escape(raw_token),
        password=escape(raw_password),
        ttl_minutes=ttl_minutes,
    )


class ResendEmailSender(IEmailSender):
    """Sends verification emails through Resend"""

    def __init__(
        self,
        api_key: str,
        from_email: str,
        token_ttl_minutes: int = 30,
        timeout_seconds: float = 10,
    ):
        resend.api_key = api_key
        self.from_email = from_email
        self.token_ttl_minutes = token_ttl_minutes
        self.timeout_seconds = timeout_seconds

    async def send_verification_email(
        self, recipient_email: str, raw_token: str, raw_password: str
    ) -> Result[None]:
        params = {
            "from": self.from_email,
            "to": [recipient_email],
            "subject": VERIFICATION_SUBJECT,
            "html": render_verification_email(
                raw_token, raw_password, self.token_ttl_minutes
            ),
        }

        try:
            # The Resend client is blocking; keep it off the event loop
            await asyncio.wait_for(
                asyncio.to_thread(resend.Emails.send, params),
                timeout=self.timeout_seconds,
            )
        except Exception as exc:
            logger.error(f"Failed to send verification email to {recipient_email}: {exc}")
            return Return.err(
                Error(
                    ErrorCode.EMAIL_DELIVERY_FAILED,
                    "Verification email could not be sent",
                )
            )

        logger.info(f"Verification email sent to {recipient_email}")
        return Return.ok(None)


class LoggingEmailSender(IEmailSender):
    """Development backend: logs the recipient, never the secrets"""

    async def send_verification_email(
        self, recipient_email: str, raw_token: str, raw_password: str
    ) -> Result[None]:
        logger.info(f"Email backend is 'log'; verification email for {recipient_email} not delivered")
        return Return.ok(None)
