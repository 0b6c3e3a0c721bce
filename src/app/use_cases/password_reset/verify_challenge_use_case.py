"""
Verify Challenge Use Case

Exchanges a correct one-time code for a short-lived reset authorization.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable

from libs.result import Result, Return
from src.app.repositories.challenge_repository import IChallengeRepository
from src.app.repositories.reset_authorization_repository import IResetAuthorizationRepository
from src.domain.base import generate_reset_token, normalize_email, utcnow
from src.domain.entities import PasswordResetAuthorization, ResetErrorKind
from src.domain.policy import ResetPolicy
from .dtos import VerifyChallengeResponse
from .errors import reset_error

logger = logging.getLogger(__name__)


class VerifyChallengeUseCase:
    """
    Use case for verifying a password reset code.

    Business Rules:
    - Expired challenges are deleted when found
    - A wrong code leaves the challenge in place until it expires
    - A correct code consumes the challenge (single-use)
    - The issued token is cryptographically random and expires after the token TTL
    """

    def __init__(
        self,
        challenges: IChallengeRepository,
        authorizations: IResetAuthorizationRepository,
        policy: ResetPolicy,
        clock: Callable[[], datetime] = utcnow,
        token_generator: Callable[[], str] = generate_reset_token,
    ):
        self.challenges = challenges
        self.authorizations = authorizations
        self.policy = policy
        self.clock = clock
        self.token_generator = token_generator

    async def execute(self, email: str, code: str) -> Result[VerifyChallengeResponse]:
        """
        Execute verify challenge use case.

        Args:
            email: Account email as entered by the user
            code: Code as entered by the user (surrounding whitespace ignored)

        Returns:
            Result with VerifyChallengeResponse carrying the reset token, or Error

        Errors:
            - CHALLENGE_NOT_FOUND: No pending code (never issued, used, or rolled back)
            - CHALLENGE_EXPIRED: Code is past its expiry
            - CHALLENGE_MISMATCH: Code does not match
        """
        normalized_email = normalize_email(email)
        challenge = await self.challenges.get(normalized_email)

        if challenge is None:
            return Return.err(reset_error(ResetErrorKind.CHALLENGE_NOT_FOUND))

        now = self.clock()
        if challenge.is_expired(now):
            await self.challenges.delete(normalized_email)
            logger.info(f"Expired reset code discarded for {normalized_email}")
            return Return.err(reset_error(ResetErrorKind.CHALLENGE_EXPIRED))

        submitted = (code or "").strip()
        if not secrets.compare_digest(challenge.code.encode(), submitted.encode()):
            logger.warning(f"Reset code mismatch for {normalized_email}")
            return Return.err(reset_error(ResetErrorKind.CHALLENGE_MISMATCH))

        await self.challenges.delete(normalized_email)

        ttl = self.policy.reset_token_ttl_seconds
        authorization = PasswordResetAuthorization(
            email=normalized_email,
            token=self.token_generator(),
            expires_at=now + timedelta(seconds=ttl),
            created_at=now,
        )
        await self.authorizations.put(authorization)

        logger.info(f"Reset authorization issued for {normalized_email}")

        return Return.ok(
            VerifyChallengeResponse(
                status="verified",
                reset_token=authorization.token,
                expires_in_seconds=ttl,
            )
        )
