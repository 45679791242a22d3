"""HTTP protocol models for the password service."""
from pydantic import BaseModel, Field

from passgen.config import settings


class PasswordRequest(BaseModel):
    """POST /password body. Omitted fields fall back to settings."""

    outputLength: int | None = Field(default=None, ge=0)
    minimumLowercase: int | None = Field(default=None, ge=0)
    minimumUppercase: int | None = Field(default=None, ge=0)
    minimumNumeric: int | None = Field(default=None, ge=0)
    minimumSpecial: int | None = Field(default=None, ge=0)
    specialCharacters: str | None = None

    def resolved(self) -> dict:
        """Return policy fields with settings defaults applied."""
        return {
            "output_length": _pick(self.outputLength, settings.output_length),
            "minimum_lowercase": _pick(self.minimumLowercase, settings.minimum_lowercase),
            "minimum_uppercase": _pick(self.minimumUppercase, settings.minimum_uppercase),
            "minimum_numeric": _pick(self.minimumNumeric, settings.minimum_numeric),
            "minimum_special": _pick(self.minimumSpecial, settings.minimum_special),
            "special_characters": _pick(self.specialCharacters, settings.special_characters),
        }


class PasswordResponse(BaseModel):
    """POST /password response."""

    protocolVersion: str = settings.protocol_version
    password: str
    length: int
    policyHash: str


def _pick(value, default):
    return default if value is None else value
