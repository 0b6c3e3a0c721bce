import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from src.app.services.notification_channel import INotificationChannel, NotificationError

logger = logging.getLogger(__name__)


class LoggingNotificationChannel(INotificationChannel):
    """Development channel: the log is the mailbox"""

    async def send(self, email: str, message: str) -> None:
        logger.info(f"Outgoing message to {email}:\n{message}")


class SmtpNotificationChannel(INotificationChannel):
    """Sends plain-text mail through an SMTP relay with STARTTLS"""

    def __init__(
        self,
        host: str,
        port: int,
        user: str,
        password: str,
        sender: str,
        subject: str = "Your password reset code",
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.sender = sender or user
        self.subject = subject

    async def send(self, email: str, message: str) -> None:
        if not self.user or not self.password:
            raise NotificationError("SMTP_USER / SMTP_PASSWORD are not configured")

        # smtplib blocks; keep it off the event loop
        await asyncio.to_thread(self._send_sync, email, message)

    def _send_sync(self, email: str, message: str) -> None:
        mail = MIMEMultipart("alternative")
        mail["Subject"] = self.subject
        mail["From"] = self.sender
        mail["To"] = email
        mail.attach(MIMEText(message, "plain"))

        with smtplib.SMTP(self.host, self.port) as server:
            server.starttls()
            server.login(self.user, self.password)
            server.sendmail(self.sender, email, mail.as_string())
