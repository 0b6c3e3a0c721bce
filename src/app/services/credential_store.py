from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Account


class CredentialStoreError(Exception):
    """Raised by credential store implementations when the backend fails"""


class ICredentialStore(ABC):
    """
    Authoritative account directory consumed by the reset flow.

    Implementations raise on backend failure; the reset use cases translate
    any exception into a typed error.
    """

    @abstractmethod
    async def find_account_by_email(self, email: str) -> Optional[Account]:
        """Look up an account by normalized email, None if absent"""
        pass

    @abstractmethod
    def is_confirmed(self, account: Account) -> bool:
        """Whether the account's email address has been confirmed"""
        pass

    @abstractmethod
    async def set_password(self, account_id: UUID, new_password: str) -> None:
        """Replace the account's password"""
        pass
