from enum import Enum

from fastapi import status
from libs.result import Error


def error_code(base_error: Error) -> str:
    """Plain string code for the JSON body; reset errors carry ResetErrorKind members"""
    code = base_error.code
    return code.value if isinstance(code, Enum) else str(code)


class ClientError(Exception):
    """A failure the caller can act on; rendered with its own status and message"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    def to_dict(self) -> dict:
        return {"code": error_code(self.base_error), "message": self.base_error.message}


class ServerError(Exception):
    """An unexpected failure; the message is never shown to the caller"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def to_dict(self) -> dict:
        return {"code": error_code(self.base_error), "message": "Internal server error"}
