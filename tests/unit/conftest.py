from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.domain.entities import Account
from src.domain.policy import ResetPolicy
from tests.fixtures.clock import FakeClock
from tests.fixtures.notification import RecordingNotificationChannel

START = datetime(2026, 1, 1, 12, 0, 0)


@pytest.fixture
def clock():
    return FakeClock(START)


@pytest.fixture
def policy():
    return ResetPolicy(external_call_timeout_seconds=0.2)


@pytest.fixture
def account():
    return Account(
        id=uuid4(),
        email="user@x.com",
        password_hash="old_hashed_password",
        email_confirmed_at=START,
    )


@pytest.fixture
def mock_credentials(account):
    """Credential store that knows exactly one confirmed account"""
    credentials = MagicMock()

    async def find_account_by_email(email):
        return account if email == account.email else None

    credentials.find_account_by_email = AsyncMock(side_effect=find_account_by_email)
    credentials.is_confirmed = MagicMock(return_value=True)
    credentials.set_password = AsyncMock(return_value=None)
    return credentials


@pytest.fixture
def notifications():
    return RecordingNotificationChannel()
