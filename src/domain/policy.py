from pydantic import BaseModel, Field


class ResetPolicy(BaseModel):
    """Tunables of the password reset flow"""

    challenge_ttl_seconds: int = Field(default=300, gt=0)
    reset_token_ttl_seconds: int = Field(default=600, gt=0)
    password_min_length: int = Field(default=6, ge=1)
    # bcrypt only accepts the first 72 bytes of a password
    password_max_bytes: int = Field(default=72, ge=1, le=72)
    external_call_timeout_seconds: float = Field(default=10.0, gt=0)

    @classmethod
    def from_config(cls, config) -> "ResetPolicy":
        return cls(
            challenge_ttl_seconds=config.CHALLENGE_TTL_SECONDS,
            reset_token_ttl_seconds=config.RESET_TOKEN_TTL_SECONDS,
            password_min_length=config.PASSWORD_MIN_LENGTH,
            external_call_timeout_seconds=config.EXTERNAL_CALL_TIMEOUT_SECONDS,
        )
