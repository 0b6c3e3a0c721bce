from typing import Callable, Dict, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.reset_authorization_repository import IResetAuthorizationRepository
from src.domain.entities import PasswordResetAuthorization


class InMemoryResetAuthorizationRepository(IResetAuthorizationRepository):
    """Process-local reset authorization store, records swapped whole"""

    def __init__(self):
        self._authorizations: Dict[str, PasswordResetAuthorization] = {}

    async def put(self, authorization: PasswordResetAuthorization) -> None:
        self._authorizations[authorization.email] = authorization

    async def get(self, email: str) -> Optional[PasswordResetAuthorization]:
        return self._authorizations.get(email)

    async def delete(self, email: str) -> None:
        self._authorizations.pop(email, None)

    def __len__(self) -> int:
        return len(self._authorizations)


class SqlResetAuthorizationRepository(IResetAuthorizationRepository):
    """Reset authorization store backed by the password_reset_authorizations table"""

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory

    async def put(self, authorization: PasswordResetAuthorization) -> None:
        record = PasswordResetAuthorization(
            email=authorization.email,
            token=authorization.token,
            expires_at=authorization.expires_at,
            created_at=authorization.created_at,
        )
        async with self.session_factory() as session:
            await session.merge(record)
            await session.commit()

    async def get(self, email: str) -> Optional[PasswordResetAuthorization]:
        async with self.session_factory() as session:
            stmt = select(PasswordResetAuthorization).where(
                PasswordResetAuthorization.email == email
            )
            result = await session.exec(stmt)
            return result.one_or_none()

    async def delete(self, email: str) -> None:
        async with self.session_factory() as session:
            authorization = await session.get(PasswordResetAuthorization, email)
            if authorization is not None:
                await session.delete(authorization)
                await session.commit()
