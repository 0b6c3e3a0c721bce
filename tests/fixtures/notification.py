import re
from typing import List, Optional, Tuple

from src.app.services.notification_channel import INotificationChannel, NotificationError

CODE_PATTERN = re.compile(r"password is: (\d{6})")


class RecordingNotificationChannel(INotificationChannel):
    """Keeps every sent message; can be switched to fail"""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.messages: List[Tuple[str, str]] = []

    async def send(self, email: str, message: str) -> None:
        if self.fail:
            raise NotificationError("SMTP relay unavailable")
        self.messages.append((email, message))

    def last_code(self, email: str) -> Optional[str]:
        for recipient, message in reversed(self.messages):
            if recipient == email:
                match = CODE_PATTERN.search(message)
                return match.group(1) if match else None
        return None
