"""
Password Reset Use Cases

OTP-based reset flow: request a code, verify it, commit a new password.
"""

from .request_reset_use_case import RequestResetUseCase, build_reset_message
from .verify_challenge_use_case import VerifyChallengeUseCase
from .commit_new_password_use_case import CommitNewPasswordUseCase
from .dtos import (
    RequestResetResponse,
    VerifyChallengeResponse,
    CommitNewPasswordResponse,
)
from .errors import RESET_ERROR_MESSAGES, reset_error

__all__ = [
    # Use Cases
    "RequestResetUseCase",
    "VerifyChallengeUseCase",
    "CommitNewPasswordUseCase",
    # DTOs - Responses
    "RequestResetResponse",
    "VerifyChallengeResponse",
    "CommitNewPasswordResponse",
    # Errors
    "RESET_ERROR_MESSAGES",
    "reset_error",
    # Helpers
    "build_reset_message",
]
