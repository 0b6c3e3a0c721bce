from abc import ABC, abstractmethod


class NotificationError(Exception):
    """Raised by notification channels when a message cannot be delivered"""


class INotificationChannel(ABC):
    """Out-of-band delivery of one-time codes to an email address"""

    @abstractmethod
    async def send(self, email: str, message: str) -> None:
        """Deliver message to email; raise if delivery fails"""
        pass
