from typing import Callable, Dict, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.challenge_repository import IChallengeRepository
from src.domain.entities import PasswordResetChallenge


class InMemoryChallengeRepository(IChallengeRepository):
    """
    Process-local challenge store.

    Records are swapped whole under their key, so a reader sees either the
    old challenge or the new one, never a mix of the two.
    """

    def __init__(self):
        self._challenges: Dict[str, PasswordResetChallenge] = {}

    async def put(self, challenge: PasswordResetChallenge) -> None:
        self._challenges[challenge.email] = challenge

    async def get(self, email: str) -> Optional[PasswordResetChallenge]:
        return self._challenges.get(email)

    async def delete(self, email: str) -> None:
        self._challenges.pop(email, None)

    def __len__(self) -> int:
        return len(self._challenges)


class SqlChallengeRepository(IChallengeRepository):
    """Challenge store backed by the password_reset_challenges table"""

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory

    async def put(self, challenge: PasswordResetChallenge) -> None:
        record = PasswordResetChallenge(
            email=challenge.email,
            code=challenge.code,
            expires_at=challenge.expires_at,
            created_at=challenge.created_at,
        )
        async with self.session_factory() as session:
            await session.merge(record)
            await session.commit()

    async def get(self, email: str) -> Optional[PasswordResetChallenge]:
        async with self.session_factory() as session:
            stmt = select(PasswordResetChallenge).where(PasswordResetChallenge.email == email)
            result = await session.exec(stmt)
            return result.one_or_none()

    async def delete(self, email: str) -> None:
        async with self.session_factory() as session:
            challenge = await session.get(PasswordResetChallenge, email)
            if challenge is not None:
                await session.delete(challenge)
                await session.commit()
