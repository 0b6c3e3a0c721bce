from functools import lru_cache

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories.challenge_repository import (
    InMemoryChallengeRepository,
    SqlChallengeRepository,
)
from src.adapter.repositories.reset_authorization_repository import (
    InMemoryResetAuthorizationRepository,
    SqlResetAuthorizationRepository,
)
from src.adapter.services.credential_store import SqlCredentialStore
from src.adapter.services.notification_channel import (
    LoggingNotificationChannel,
    SmtpNotificationChannel,
)
from src.app.services.notification_channel import INotificationChannel
from src.app.services.reset_orchestrator import PasswordResetOrchestrator
from src.domain.policy import ResetPolicy

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def create_tables():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


def build_notification_channel(config) -> INotificationChannel:
    if config.NOTIFICATION_BACKEND == "smtp":
        return SmtpNotificationChannel(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            user=config.SMTP_USER,
            password=config.SMTP_PASSWORD,
            sender=config.SMTP_FROM,
        )
    if config.NOTIFICATION_BACKEND == "log":
        return LoggingNotificationChannel()
    raise ValueError(f"Unknown NOTIFICATION_BACKEND: {config.NOTIFICATION_BACKEND}")


def build_reset_orchestrator(config, session_factory=AsyncSessionLocal) -> PasswordResetOrchestrator:
    """
    Wire a reset orchestrator from configuration.

    Args:
        config: ApplicationConfig-like object
        session_factory: Async session factory for the account database

    Returns:
        PasswordResetOrchestrator owning its challenge and authorization stores
    """
    if config.RESET_STORE_BACKEND == "database":
        challenges = SqlChallengeRepository(session_factory)
        authorizations = SqlResetAuthorizationRepository(session_factory)
    elif config.RESET_STORE_BACKEND == "memory":
        challenges = InMemoryChallengeRepository()
        authorizations = InMemoryResetAuthorizationRepository()
    else:
        raise ValueError(f"Unknown RESET_STORE_BACKEND: {config.RESET_STORE_BACKEND}")

    return PasswordResetOrchestrator(
        credentials=SqlCredentialStore(session_factory),
        notifications=build_notification_channel(config),
        policy=ResetPolicy.from_config(config),
        challenges=challenges,
        authorizations=authorizations,
        app_name=config.APP_NAME,
    )


@lru_cache(maxsize=1)
def get_reset_orchestrator() -> PasswordResetOrchestrator:
    """Process-wide orchestrator; its stores live as long as the process"""
    return build_reset_orchestrator(ApplicationConfig)
