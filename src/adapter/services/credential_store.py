import asyncio
from typing import Callable, Optional
from uuid import UUID

import bcrypt
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.credential_store import CredentialStoreError, ICredentialStore
from src.domain.base import utcnow
from src.domain.entities import Account, AccountStatus

BCRYPT_ROUNDS = 12


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(BCRYPT_ROUNDS)).decode()


class SqlCredentialStore(ICredentialStore):
    """
    Credential store over the accounts table.

    Each call opens its own session, so a single instance can be shared by
    the process-wide reset orchestrator. Accounts are handed out detached
    with their columns loaded.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory

    async def find_account_by_email(self, email: str) -> Optional[Account]:
        async with self.session_factory() as session:
            async with SqlAlchemyUnitOfWork(session) as uow:
                account = await uow.accounts.get_by_email(email)
                # The unit of work rolls back on exit, which would expire it
                if account is not None:
                    session.expunge(account)
                return account

    def is_confirmed(self, account: Account) -> bool:
        return account.email_confirmed_at is not None and account.status == AccountStatus.active

    async def set_password(self, account_id: UUID, new_password: str) -> None:
        # bcrypt is CPU bound; keep it off the event loop
        password_hash = await asyncio.to_thread(hash_password, new_password)

        async with self.session_factory() as session:
            async with SqlAlchemyUnitOfWork(session) as uow:
                account = await uow.accounts.get_by_id(account_id)
                if account is None:
                    raise CredentialStoreError(f"Account {account_id} no longer exists")

                account.password_hash = password_hash
                account.password_changed_at = utcnow()
                await uow.accounts.update(account)
                await uow.commit()
