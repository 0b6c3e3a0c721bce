import bcrypt
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.challenge_repository import SqlChallengeRepository
from src.adapter.repositories.reset_authorization_repository import (
    SqlResetAuthorizationRepository,
)
from src.adapter.services.credential_store import SqlCredentialStore
from src.app.services.reset_orchestrator import PasswordResetOrchestrator
from src.depends import get_reset_orchestrator
from src.domain.base import utcnow
from src.domain.entities import Account
from src.domain.policy import ResetPolicy
from tests.fixtures.json_loader import ResetDataLoader
from tests.fixtures.notification import RecordingNotificationChannel


@pytest_asyncio.fixture
def test_data():
    return ResetDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
def notifications():
    return RecordingNotificationChannel()


@pytest_asyncio.fixture
def orchestrator(session_factory, notifications):
    return PasswordResetOrchestrator(
        credentials=SqlCredentialStore(session_factory),
        notifications=notifications,
        policy=ResetPolicy(),
        challenges=SqlChallengeRepository(session_factory),
        authorizations=SqlResetAuthorizationRepository(session_factory),
    )


@pytest_asyncio.fixture
async def client(orchestrator):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)
    app.dependency_overrides[get_reset_orchestrator] = lambda: orchestrator

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def create_account(db_session: AsyncSession, data: dict) -> Account:
    """Insert an account from a test_data.json entry"""
    password_hash = bcrypt.hashpw(data["password"].encode(), bcrypt.gensalt(4))
    account = Account(
        email=data["email"],
        password_hash=password_hash.decode(),
        email_confirmed_at=utcnow() if data["confirmed"] else None,
    )
    db_session.add(account)
    await db_session.commit()
    await db_session.refresh(account)
    return account


@pytest_asyncio.fixture
async def confirmed_account(db_session, test_data):
    return await create_account(db_session, test_data.account("confirmed_account"))


@pytest_asyncio.fixture
async def unconfirmed_account(db_session, test_data):
    return await create_account(db_session, test_data.account("unconfirmed_account"))
