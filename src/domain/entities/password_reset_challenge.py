"""
PasswordResetChallenge Entity

One-time code proving control of an email address.
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow


class PasswordResetChallenge(SQLModel, table=True):
    """
    PasswordResetChallenge entity - pending OTP for a password reset.

    Business Rules:
    - At most one live challenge per normalized email (email is the key)
    - A new request replaces the previous challenge
    - Expires 5 minutes after issuance, checked lazily on access
    - Single-use: deleted on successful verification
    """

    __tablename__ = "password_reset_challenges"

    email: str = Field(primary_key=True, max_length=255)
    code: str = Field(max_length=6)

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
