from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import PasswordResetChallenge


class IChallengeRepository(ABC):
    """
    PasswordResetChallenge store interface - application layer

    Holds at most one challenge per normalized email. The store never
    evicts on its own; callers check expiry and delete what they find stale.
    """

    @abstractmethod
    async def put(self, challenge: PasswordResetChallenge) -> None:
        """Insert or replace the challenge for challenge.email"""
        pass

    @abstractmethod
    async def get(self, email: str) -> Optional[PasswordResetChallenge]:
        """Get the challenge for email, expired or not"""
        pass

    @abstractmethod
    async def delete(self, email: str) -> None:
        """Remove the challenge for email (idempotent)"""
        pass
