from unittest.mock import patch

import pytest

from tripmate.adapter.services.email_sender import (
    LoggingEmailSender,
    ResendEmailSender,
    render_verification_email,
)


def test_render_escapes_secrets():
    html = render_verification_email("tok<en>", "pa&ss", ttl_minutes=30)

    assert "tok&lt;en&gt;" in html
    assert "pa&amp;ss" in html
    assert "30 minutes" in html


@pytest.mark.asyncio
async def test_resend_sender_sends_once():
    sender = ResendEmailSender(api_key="re_test", from_email="Tripmate <no-reply@example.com>")

    with patch("tripmate.adapter.services.email_sender.resend.Emails.send") as send:
        send.return_value = {"id": "email-id"}
        result = await sender.send_verification_email("alice@example.com", "raw-token", "raw-pass")

    assert result.is_ok()
    send.assert_called_once()
    params = send.call_args[0][0]
    assert params["to"] == ["alice@example.com"]
    assert "raw-token" in params["html"]
    assert "raw-pass" in params["html"]


@pytest.mark.asyncio
async def test_resend_failure_is_reported():
    sender = ResendEmailSender(api_key="re_test", from_email="Tripmate <no-reply@example.com>")

    with patch(
        "tripmate.adapter.services.email_sender.resend.Emails.send",
        side_effect=RuntimeError("provider down"),
    ):
        result = await sender.send_verification_email("alice@example.com", "raw-token", "raw-pass")

    assert result.is_err()
    assert result.error.code == "EMAIL_DELIVERY_FAILED"


@pytest.mark.asyncio
async def test_logging_sender_never_logs_secrets(caplog):
    caplog.set_level("INFO")

    result = await LoggingEmailSender().send_verification_email(
        "alice@example.com", "raw-token-value", "raw-password-value"
    )

    assert result.is_ok()
    assert "alice@example.com" in caplog.text
    assert "raw-token-value" not in caplog.text
    assert "raw-password-value" not in caplog.text
