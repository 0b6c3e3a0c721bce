"""
Integration tests for requesting a password reset code

POST /auth/password-reset/request
"""
from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.base import utcnow
from src.domain.entities import PasswordResetChallenge


@pytest.mark.asyncio
async def test_successful_reset_request(
    client: AsyncClient, db_session: AsyncSession, confirmed_account, notifications
):
    """
    Given I have a confirmed account
    When I request a password reset
    Then a 6-digit code is emailed to me
    And the code is stored with a 5 minute expiry
    And the response does not contain the code
    """
    response = await client.post(
        "/auth/password-reset/request", json={"email": "user@x.com"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "sent"
    assert "message" in data

    code = notifications.last_code("user@x.com")
    assert code is not None and len(code) == 6
    assert code not in response.text

    result = await db_session.exec(select(PasswordResetChallenge))
    challenge = result.one()
    assert challenge.email == "user@x.com"
    assert challenge.code == code

    time_until_expiry = challenge.expires_at - utcnow()
    assert timedelta(minutes=4) < time_until_expiry <= timedelta(minutes=5)


@pytest.mark.asyncio
async def test_reset_request_normalizes_email(
    client: AsyncClient, confirmed_account, notifications
):
    response = await client.post(
        "/auth/password-reset/request", json={"email": "USER@X.com"}
    )

    assert response.status_code == 200
    assert notifications.messages[0][0] == "user@x.com"


@pytest.mark.asyncio
async def test_reset_request_unknown_account(client: AsyncClient, db_session: AsyncSession):
    response = await client.post(
        "/auth/password-reset/request", json={"email": "nobody@example.com"}
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ACCOUNT_NOT_FOUND"

    result = await db_session.exec(select(PasswordResetChallenge))
    assert result.all() == []


@pytest.mark.asyncio
async def test_reset_request_unconfirmed_account(
    client: AsyncClient, unconfirmed_account, notifications
):
    response = await client.post(
        "/auth/password-reset/request", json={"email": "pending@example.com"}
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "ACCOUNT_UNCONFIRMED"
    assert notifications.messages == []


@pytest.mark.asyncio
async def test_reset_request_delivery_failure(
    client: AsyncClient, db_session: AsyncSession, confirmed_account, notifications
):
    notifications.fail = True

    response = await client.post(
        "/auth/password-reset/request", json={"email": "user@x.com"}
    )

    assert response.status_code == 503
    error = response.json()["error"]
    assert error["code"] == "DELIVERY_FAILED"
    assert "SMTP" not in error["message"]

    result = await db_session.exec(select(PasswordResetChallenge))
    assert result.all() == []


@pytest.mark.asyncio
async def test_second_request_replaces_stored_code(
    client: AsyncClient, db_session: AsyncSession, confirmed_account, notifications
):
    await client.post("/auth/password-reset/request", json={"email": "user@x.com"})
    await client.post("/auth/password-reset/request", json={"email": "user@x.com"})

    result = await db_session.exec(select(PasswordResetChallenge))
    challenges = result.all()
    assert len(challenges) == 1
    assert challenges[0].code == notifications.last_code("user@x.com")


@pytest.mark.asyncio
async def test_reset_request_invalid_email_format(client: AsyncClient):
    response = await client.post(
        "/auth/password-reset/request", json={"email": "not-a-valid-email"}
    )

    assert response.status_code == 422
