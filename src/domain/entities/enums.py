"""
Reset Service Domain Enums

All enumeration types used across domain entities and use cases.
"""

from enum import Enum


class AccountStatus(str, Enum):
    """Account status"""

    active = "active"
    disabled = "disabled"


class ResetErrorKind(str, Enum):
    """
    Closed set of password reset failures.

    Every Error returned by the reset use cases carries one of these as its code.
    """

    # Request
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    ACCOUNT_UNCONFIRMED = "ACCOUNT_UNCONFIRMED"
    ACCOUNT_LOOKUP_FAILED = "ACCOUNT_LOOKUP_FAILED"
    DELIVERY_FAILED = "DELIVERY_FAILED"

    # Verify
    CHALLENGE_NOT_FOUND = "CHALLENGE_NOT_FOUND"
    CHALLENGE_EXPIRED = "CHALLENGE_EXPIRED"
    CHALLENGE_MISMATCH = "CHALLENGE_MISMATCH"

    # Commit
    AUTHORIZATION_INVALID = "AUTHORIZATION_INVALID"
    AUTHORIZATION_EXPIRED = "AUTHORIZATION_EXPIRED"
    CREDENTIAL_UPDATE_FAILED = "CREDENTIAL_UPDATE_FAILED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
