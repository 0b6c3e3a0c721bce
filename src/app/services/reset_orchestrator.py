"""
Password Reset Orchestrator

Request -> Verify -> Commit, per email. There is no stored state field:
a pending challenge means "challenge issued", a pending authorization means
"authorized", and neither means idle (or committed).
"""

from datetime import datetime
from typing import Callable, Optional

from libs.result import Result
from src.app.repositories.challenge_repository import IChallengeRepository
from src.app.repositories.reset_authorization_repository import IResetAuthorizationRepository
from src.app.services.credential_store import ICredentialStore
from src.app.services.notification_channel import INotificationChannel
from src.app.use_cases.password_reset import (
    CommitNewPasswordResponse,
    CommitNewPasswordUseCase,
    RequestResetResponse,
    RequestResetUseCase,
    VerifyChallengeResponse,
    VerifyChallengeUseCase,
)
from src.domain.base import generate_challenge_code, generate_reset_token, utcnow
from src.domain.policy import ResetPolicy


class PasswordResetOrchestrator:
    """
    Owns the challenge and authorization stores and drives the reset flow.

    The two stores are separate instances handed over at construction and
    are not shared with any other orchestrator.
    """

    def __init__(
        self,
        credentials: ICredentialStore,
        notifications: INotificationChannel,
        challenges: IChallengeRepository,
        authorizations: IResetAuthorizationRepository,
        policy: Optional[ResetPolicy] = None,
        clock: Callable[[], datetime] = utcnow,
        code_generator: Callable[[], str] = generate_challenge_code,
        token_generator: Callable[[], str] = generate_reset_token,
        app_name: str = "CarbonWise",
    ):
        self.policy = policy or ResetPolicy()
        self._challenges = challenges
        self._authorizations = authorizations

        self._request_reset = RequestResetUseCase(
            self._challenges,
            credentials,
            notifications,
            self.policy,
            clock=clock,
            code_generator=code_generator,
            app_name=app_name,
        )
        self._verify_challenge = VerifyChallengeUseCase(
            self._challenges,
            self._authorizations,
            self.policy,
            clock=clock,
            token_generator=token_generator,
        )
        self._commit_new_password = CommitNewPasswordUseCase(
            self._authorizations,
            credentials,
            self.policy,
            clock=clock,
        )

    async def request_reset(self, email: str) -> Result[RequestResetResponse]:
        return await self._request_reset.execute(email)

    async def verify_challenge(self, email: str, code: str) -> Result[VerifyChallengeResponse]:
        return await self._verify_challenge.execute(email, code)

    async def commit_new_password(
        self, email: str, reset_token: str, new_password: str
    ) -> Result[CommitNewPasswordResponse]:
        return await self._commit_new_password.execute(email, reset_token, new_password)
