"""
Commit New Password Use Case

Spends a reset authorization to change the account password.
"""

import logging
import secrets
from datetime import datetime
from typing import Callable

from libs.result import Result, Return
from src.app.repositories.reset_authorization_repository import IResetAuthorizationRepository
from src.app.services.credential_store import ICredentialStore
from src.domain.base import normalize_email, utcnow
from src.domain.entities import ResetErrorKind
from src.domain.policy import ResetPolicy
from .dtos import CommitNewPasswordResponse
from .errors import reset_error
from .external import bounded

logger = logging.getLogger(__name__)


class CommitNewPasswordUseCase:
    """
    Use case for committing a new password.

    Business Rules:
    - Token must exactly match the stored authorization for the email
    - Expired authorizations are deleted when found
    - New password must meet the length policy (bcrypt caps it at 72 bytes)
    - Account is re-resolved at commit time
    - Authorization is consumed only after the password is changed; a
      backend failure keeps it so the commit can be retried
    """

    def __init__(
        self,
        authorizations: IResetAuthorizationRepository,
        credentials: ICredentialStore,
        policy: ResetPolicy,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.authorizations = authorizations
        self.credentials = credentials
        self.policy = policy
        self.clock = clock

    def _validate_password(self, password: str) -> Result[None]:
        password = password or ""
        if (
            len(password) < self.policy.password_min_length
            or len(password.encode()) > self.policy.password_max_bytes
        ):
            return Return.err(
                reset_error(
                    ResetErrorKind.VALIDATION_ERROR,
                    min_length=self.policy.password_min_length,
                    max_bytes=self.policy.password_max_bytes,
                )
            )
        return Return.ok(None)

    async def execute(
        self, email: str, reset_token: str, new_password: str
    ) -> Result[CommitNewPasswordResponse]:
        """
        Execute commit new password use case.

        Args:
            email: Account email as entered by the user
            reset_token: Token returned by the verify step
            new_password: New password to set

        Returns:
            Result with CommitNewPasswordResponse, or Error

        Errors:
            - AUTHORIZATION_INVALID: No authorization or token mismatch
            - AUTHORIZATION_EXPIRED: Authorization is past its expiry
            - VALIDATION_ERROR: Password too short or too long
            - ACCOUNT_NOT_FOUND: Account disappeared since the request
            - CREDENTIAL_UPDATE_FAILED: Credential store failed or timed out
        """
        normalized_email = normalize_email(email)
        authorization = await self.authorizations.get(normalized_email)

        if authorization is None:
            return Return.err(reset_error(ResetErrorKind.AUTHORIZATION_INVALID))

        expired = authorization.is_expired(self.clock())

        if not secrets.compare_digest(
            authorization.token.encode(), (reset_token or "").encode()
        ):
            if expired:
                await self.authorizations.delete(normalized_email)
            return Return.err(reset_error(ResetErrorKind.AUTHORIZATION_INVALID))

        if expired:
            await self.authorizations.delete(normalized_email)
            logger.info(f"Expired reset authorization discarded for {normalized_email}")
            return Return.err(reset_error(ResetErrorKind.AUTHORIZATION_EXPIRED))

        password_validation = self._validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        timeout = self.policy.external_call_timeout_seconds

        try:
            account = await bounded(
                self.credentials.find_account_by_email(normalized_email), timeout
            )
        except Exception:
            logger.exception(f"Account lookup failed during commit for {normalized_email}")
            return Return.err(reset_error(ResetErrorKind.CREDENTIAL_UPDATE_FAILED))

        if account is None:
            # Authorization can never be spent now
            await self.authorizations.delete(normalized_email)
            return Return.err(reset_error(ResetErrorKind.ACCOUNT_NOT_FOUND))

        try:
            await bounded(self.credentials.set_password(account.id, new_password), timeout)
        except Exception:
            logger.exception(f"Password update failed for {normalized_email}")
            return Return.err(reset_error(ResetErrorKind.CREDENTIAL_UPDATE_FAILED))

        await self.authorizations.delete(normalized_email)

        logger.info(f"Password reset completed for {normalized_email}")

        return Return.ok(
            CommitNewPasswordResponse(
                status="success",
                message="Password updated successfully",
            )
        )
