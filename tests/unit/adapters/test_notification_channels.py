from unittest.mock import MagicMock, patch

import pytest

from src.adapter.services.notification_channel import (
    LoggingNotificationChannel,
    SmtpNotificationChannel,
)
from src.app.services.notification_channel import NotificationError


@pytest.mark.asyncio
async def test_logging_channel_writes_message(caplog):
    channel = LoggingNotificationChannel()

    with caplog.at_level("INFO"):
        await channel.send("user@x.com", "Your OTP for changing your password is: 123456")

    assert "user@x.com" in caplog.text
    assert "123456" in caplog.text


@pytest.mark.asyncio
async def test_smtp_channel_requires_credentials():
    channel = SmtpNotificationChannel(
        host="smtp.example.com", port=587, user="", password="", sender=""
    )

    with pytest.raises(NotificationError):
        await channel.send("user@x.com", "hello")


@pytest.mark.asyncio
async def test_smtp_channel_sends_over_starttls():
    channel = SmtpNotificationChannel(
        host="smtp.example.com",
        port=587,
        user="mailer@example.com",
        password="secret",
        sender="",
    )
    server = MagicMock()

    with patch("src.adapter.services.notification_channel.smtplib.SMTP") as smtp:
        smtp.return_value.__enter__.return_value = server
        await channel.send("user@x.com", "Your OTP for changing your password is: 123456")

    smtp.assert_called_once_with("smtp.example.com", 587)
    server.starttls.assert_called_once()
    server.login.assert_called_once_with("mailer@example.com", "secret")
    sender, recipient, body = server.sendmail.call_args.args
    assert sender == "mailer@example.com"
    assert recipient == "user@x.com"
    assert "123456" in body


@pytest.mark.asyncio
async def test_smtp_failure_propagates():
    channel = SmtpNotificationChannel(
        host="smtp.example.com", port=587, user="u", password="p", sender="u"
    )

    with patch("src.adapter.services.notification_channel.smtplib.SMTP") as smtp:
        smtp.side_effect = OSError("connection refused")
        with pytest.raises(OSError):
            await channel.send("user@x.com", "hello")
