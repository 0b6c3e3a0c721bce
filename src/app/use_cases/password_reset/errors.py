from libs.result import Error
from src.domain.entities import ResetErrorKind

RESET_ERROR_MESSAGES = {
    ResetErrorKind.ACCOUNT_NOT_FOUND: (
        "No account found with this email address. "
        "Please check your email or create a new account."
    ),
    ResetErrorKind.ACCOUNT_UNCONFIRMED: (
        "Please verify your email address first before resetting your password."
    ),
    ResetErrorKind.ACCOUNT_LOOKUP_FAILED: "Failed to verify user. Please try again.",
    ResetErrorKind.DELIVERY_FAILED: "Failed to send verification code. Please try again.",
    ResetErrorKind.CHALLENGE_NOT_FOUND: (
        "Verification code not found or expired. Please request a new one."
    ),
    ResetErrorKind.CHALLENGE_EXPIRED: "Verification code has expired. Please request a new one.",
    ResetErrorKind.CHALLENGE_MISMATCH: "Invalid verification code. Please check and try again.",
    ResetErrorKind.AUTHORIZATION_INVALID: "Invalid or expired reset session. Please start over.",
    ResetErrorKind.AUTHORIZATION_EXPIRED: "Reset session has expired. Please start over.",
    ResetErrorKind.CREDENTIAL_UPDATE_FAILED: "Failed to update password. Please try again.",
    ResetErrorKind.VALIDATION_ERROR: (
        "Password must be at least {min_length} characters long "
        "and at most {max_bytes} bytes"
    ),
}


def reset_error(kind: ResetErrorKind, **params) -> Error:
    """Build the Error for kind with its one user-facing message"""
    return Error(kind, RESET_ERROR_MESSAGES[kind].format(**params))
