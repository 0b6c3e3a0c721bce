"""
PasswordResetAuthorization Entity

Opaque token authorizing exactly one password change.
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow


class PasswordResetAuthorization(SQLModel, table=True):
    """
    PasswordResetAuthorization entity - issued after a challenge is verified.

    Business Rules:
    - At most one live authorization per normalized email (email is the key)
    - Token is cryptographically random and never user-enterable
    - Expires 10 minutes after issuance, checked lazily on access
    - Single-use: deleted after the password is changed
    """

    __tablename__ = "password_reset_authorizations"

    email: str = Field(primary_key=True, max_length=255)
    token: str = Field(max_length=64)

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
