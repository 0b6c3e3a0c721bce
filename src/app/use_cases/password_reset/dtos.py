"""
Password Reset Use Case DTOs (Data Transfer Objects)

Response classes for the three reset steps.
"""

from pydantic import BaseModel


class RequestResetResponse(BaseModel):
    """Response for request reset use case (the code is never echoed)"""

    status: str
    message: str


class VerifyChallengeResponse(BaseModel):
    """Response for verify challenge use case"""

    status: str
    reset_token: str
    expires_in_seconds: int


class CommitNewPasswordResponse(BaseModel):
    """Response for commit new password use case"""

    status: str
    message: str
