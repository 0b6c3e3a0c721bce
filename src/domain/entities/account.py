"""
Account Entity

A CarbonWise user account, as seen by the password reset flow.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import AccountStatus


class Account(SQLModel, table=True):
    """
    Account entity - the credential record a password reset targets.

    Business Rules:
    - Email is unique and compared case-insensitively
    - Password stored as bcrypt hash (cost factor 12)
    - Only accounts with a confirmed email may reset their password
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    status: AccountStatus = Field(default=AccountStatus.active)

    email_confirmed_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    password_changed_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    __table_args__ = (Index("idx_account_status", "status"),)
