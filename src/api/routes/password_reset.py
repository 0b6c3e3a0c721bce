from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.reset_orchestrator import PasswordResetOrchestrator
from src.app.use_cases.password_reset import (
    CommitNewPasswordResponse,
    RequestResetResponse,
    VerifyChallengeResponse,
)
from src.depends import get_reset_orchestrator
from src.domain.entities import ResetErrorKind

router = APIRouter(prefix="/auth/password-reset", tags=["Password Reset"])

ERROR_STATUS_CODES = {
    ResetErrorKind.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResetErrorKind.ACCOUNT_UNCONFIRMED: status.HTTP_403_FORBIDDEN,
    ResetErrorKind.ACCOUNT_LOOKUP_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ResetErrorKind.DELIVERY_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ResetErrorKind.CHALLENGE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ResetErrorKind.CHALLENGE_EXPIRED: status.HTTP_410_GONE,
    ResetErrorKind.CHALLENGE_MISMATCH: status.HTTP_400_BAD_REQUEST,
    ResetErrorKind.AUTHORIZATION_INVALID: status.HTTP_400_BAD_REQUEST,
    ResetErrorKind.AUTHORIZATION_EXPIRED: status.HTTP_410_GONE,
    ResetErrorKind.CREDENTIAL_UPDATE_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ResetErrorKind.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}


def raise_for_error(error):
    status_code = ERROR_STATUS_CODES.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


class RequestResetRequest(BaseModel):
    """
    Request reset HTTP request payload

    Validates incoming password reset request.
    """

    email: EmailStr = Field(..., description="Account email address")


@router.post("/request", status_code=status.HTTP_200_OK, response_model=RequestResetResponse)
async def request_reset(
    request: RequestResetRequest,
    orchestrator: PasswordResetOrchestrator = Depends(get_reset_orchestrator),
):
    """
    Request Password Reset

    Sends a 6-digit verification code to the account email.
    Any earlier pending code for the same email stops working.

    Raises:
        - 404 Not Found: No account for this email
        - 403 Forbidden: Account email not confirmed
        - 503 Service Unavailable: Account lookup or email delivery failed
    """
    result = await orchestrator.request_reset(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class VerifyChallengeRequest(BaseModel):
    """
    Verify challenge HTTP request payload

    Validates incoming verification code submission.
    """

    email: EmailStr = Field(..., description="Account email address")
    code: str = Field(..., min_length=1, max_length=32, description="Verification code from email")


@router.post("/verify", status_code=status.HTTP_200_OK, response_model=VerifyChallengeResponse)
async def verify_challenge(
    request: VerifyChallengeRequest,
    orchestrator: PasswordResetOrchestrator = Depends(get_reset_orchestrator),
):
    """
    Verify Reset Code

    Exchanges a correct code for a short-lived reset token.

    Raises:
        - 400 Bad Request: No pending code, or wrong code
        - 410 Gone: Code expired
    """
    result = await orchestrator.verify_challenge(request.email, request.code)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class CommitNewPasswordRequest(BaseModel):
    """
    Commit new password HTTP request payload

    Password length uses the same policy value as the use case.
    """

    email: EmailStr = Field(..., description="Account email address")
    reset_token: str = Field(..., min_length=1, description="Token from the verify step")
    new_password: str = Field(
        ...,
        min_length=ApplicationConfig.PASSWORD_MIN_LENGTH,
        description=f"New password (min {ApplicationConfig.PASSWORD_MIN_LENGTH} chars)",
    )


@router.post("/commit", status_code=status.HTTP_200_OK, response_model=CommitNewPasswordResponse)
async def commit_new_password(
    request: CommitNewPasswordRequest,
    orchestrator: PasswordResetOrchestrator = Depends(get_reset_orchestrator),
):
    """
    Commit New Password

    Sets the new password and consumes the reset token.
    A failed backend update keeps the token so the request can be retried.

    Raises:
        - 400 Bad Request: Invalid reset session or password policy violation
        - 404 Not Found: Account no longer exists
        - 410 Gone: Reset session expired
        - 503 Service Unavailable: Password update failed (retry with same token)
    """
    result = await orchestrator.commit_new_password(
        request.email, request.reset_token, request.new_password
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
