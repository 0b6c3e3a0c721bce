"""
Reset Service Domain Entities

One entity per file; enums live in enums.py.
"""

from .enums import AccountStatus, ResetErrorKind
from .account import Account
from .password_reset_challenge import PasswordResetChallenge
from .password_reset_authorization import PasswordResetAuthorization

__all__ = [
    # Enums
    "AccountStatus",
    "ResetErrorKind",
    # Entities
    "Account",
    "PasswordResetChallenge",
    "PasswordResetAuthorization",
]
