from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import PasswordResetAuthorization


class IResetAuthorizationRepository(ABC):
    """
    PasswordResetAuthorization store interface - application layer

    Same contract as the challenge store, in a separate namespace.
    """

    @abstractmethod
    async def put(self, authorization: PasswordResetAuthorization) -> None:
        """Insert or replace the authorization for authorization.email"""
        pass

    @abstractmethod
    async def get(self, email: str) -> Optional[PasswordResetAuthorization]:
        """Get the authorization for email, expired or not"""
        pass

    @abstractmethod
    async def delete(self, email: str) -> None:
        """Remove the authorization for email (idempotent)"""
        pass
