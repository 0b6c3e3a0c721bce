import secrets
from datetime import UTC, datetime

CHALLENGE_CODE_LENGTH = 6


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in DateTime columns"""
    return datetime.now(UTC).replace(tzinfo=None)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def generate_challenge_code() -> str:
    """Uniform draw over 000000-999999, zero-padded to six digits"""
    return str(secrets.randbelow(10**CHALLENGE_CODE_LENGTH)).zfill(CHALLENGE_CODE_LENGTH)


def generate_reset_token() -> str:
    return secrets.token_urlsafe(32)
