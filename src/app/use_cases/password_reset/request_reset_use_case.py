"""
Request Reset Use Case

Issues a one-time code for a password reset and delivers it out of band.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable

from libs.result import Result, Return
from src.app.repositories.challenge_repository import IChallengeRepository
from src.app.services.credential_store import ICredentialStore
from src.app.services.notification_channel import INotificationChannel
from src.domain.base import generate_challenge_code, normalize_email, utcnow
from src.domain.entities import PasswordResetChallenge, ResetErrorKind
from src.domain.policy import ResetPolicy
from .dtos import RequestResetResponse
from .errors import reset_error
from .external import bounded

logger = logging.getLogger(__name__)


def build_reset_message(code: str, ttl_seconds: int, app_name: str) -> str:
    ttl_minutes = max(1, ttl_seconds // 60)
    return (
        f"Your OTP for changing your password is: {code}\n\n"
        f"This code will expire in {ttl_minutes} minutes.\n\n"
        f"If you didn't request this password reset, please ignore this email.\n\n"
        f"- {app_name} Team"
    )


class RequestResetUseCase:
    """
    Use case for requesting a password reset code.

    Business Rules:
    - Account must exist (existence is reported to the caller)
    - Account email must be confirmed
    - 6-digit code, uniformly random, expires after the challenge TTL
    - A new request replaces any pending challenge for the email
    - If delivery fails the new challenge is rolled back
    - The code only travels through the notification channel
    """

    def __init__(
        self,
        challenges: IChallengeRepository,
        credentials: ICredentialStore,
        notifications: INotificationChannel,
        policy: ResetPolicy,
        clock: Callable[[], datetime] = utcnow,
        code_generator: Callable[[], str] = generate_challenge_code,
        app_name: str = "CarbonWise",
    ):
        self.challenges = challenges
        self.credentials = credentials
        self.notifications = notifications
        self.policy = policy
        self.clock = clock
        self.code_generator = code_generator
        self.app_name = app_name

    async def execute(self, email: str) -> Result[RequestResetResponse]:
        """
        Execute request reset use case.

        Args:
            email: Account email as entered by the user

        Returns:
            Result with RequestResetResponse, or Error

        Errors:
            - ACCOUNT_NOT_FOUND: No account for this email
            - ACCOUNT_UNCONFIRMED: Email address not confirmed yet
            - ACCOUNT_LOOKUP_FAILED: Credential store failed or timed out
            - DELIVERY_FAILED: Notification channel failed or timed out
        """
        normalized_email = normalize_email(email)
        timeout = self.policy.external_call_timeout_seconds

        try:
            account = await bounded(
                self.credentials.find_account_by_email(normalized_email), timeout
            )
            confirmed = account is not None and self.credentials.is_confirmed(account)
        except Exception:
            logger.exception(f"Account lookup failed for {normalized_email}")
            return Return.err(reset_error(ResetErrorKind.ACCOUNT_LOOKUP_FAILED))

        if account is None:
            return Return.err(reset_error(ResetErrorKind.ACCOUNT_NOT_FOUND))

        if not confirmed:
            return Return.err(reset_error(ResetErrorKind.ACCOUNT_UNCONFIRMED))

        now = self.clock()
        challenge = PasswordResetChallenge(
            email=normalized_email,
            code=self.code_generator(),
            expires_at=now + timedelta(seconds=self.policy.challenge_ttl_seconds),
            created_at=now,
        )
        await self.challenges.put(challenge)

        message = build_reset_message(
            challenge.code, self.policy.challenge_ttl_seconds, self.app_name
        )
        try:
            await bounded(self.notifications.send(normalized_email, message), timeout)
        except Exception:
            logger.exception(f"Failed to deliver reset code to {normalized_email}")
            await self._rollback(challenge)
            return Return.err(reset_error(ResetErrorKind.DELIVERY_FAILED))

        logger.info(f"Password reset code sent to {normalized_email}")

        return Return.ok(
            RequestResetResponse(
                status="sent",
                message="Verification code sent to your email address",
            )
        )

    async def _rollback(self, challenge: PasswordResetChallenge) -> None:
        # Leave a newer challenge from a concurrent request in place
        current = await self.challenges.get(challenge.email)
        if current is not None and current.code == challenge.code and (
            current.expires_at == challenge.expires_at
        ):
            await self.challenges.delete(challenge.email)
