"""Error codes and exceptions for password generation."""
from enum import Enum
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from passgen.config import settings


class ErrorCode(str, Enum):
    """Error codes raised by the generator and the service."""

    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    INVALID_REQUEST = "INVALID_REQUEST"
    ENTROPY_FAILURE = "ENTROPY_FAILURE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


ERROR_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_CONFIGURATION: 400,
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.ENTROPY_FAILURE: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}

# Whether retrying the same call can succeed
ERROR_RECOVERABLE: dict[ErrorCode, bool] = {
    ErrorCode.INVALID_CONFIGURATION: False,
    ErrorCode.INVALID_REQUEST: False,
    ErrorCode.ENTROPY_FAILURE: False,
    ErrorCode.INTERNAL_ERROR: False,
}


class ErrorBody(BaseModel):
    """Error body shape."""

    code: str
    message: str
    recoverable: bool


class ErrorResponse(BaseModel):
    """Full error response."""

    protocolVersion: str = settings.protocol_version
    error: ErrorBody


class PasswordError(Exception):
    """Base error that maps to a protocol error response."""

    def __init__(self, code: ErrorCode, message: str | None = None, **details: Any):
        self.code = code
        self.message = message or f"Error: {code.value}"
        self.status_code = ERROR_HTTP_STATUS[code]
        self.recoverable = ERROR_RECOVERABLE[code]
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> JSONResponse:
        """Convert to JSONResponse."""
        return JSONResponse(
            status_code=self.status_code,
            content=ErrorResponse(
                error=ErrorBody(
                    code=self.code.value,
                    message=self.message,
                    recoverable=self.recoverable,
                )
            ).model_dump(),
        )


class ConfigurationError(PasswordError):
    """
    Password policy cannot be satisfied.

    Raised at generator construction, before any randomness is consumed.
    """

    def __init__(self, message: str, output_length: int, required_length: int):
        super().__init__(
            ErrorCode.INVALID_CONFIGURATION,
            message,
            output_length=output_length,
            required_length=required_length,
        )
        self.output_length = output_length
        self.required_length = required_length
