"""Application configuration derived from defaults and environment."""
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Generator settings, overridable through PASSGEN_* variables."""

    model_config = ConfigDict(env_prefix="PASSGEN_")

    # Runtime
    debug: bool = False
    log_level: str = "INFO"

    # Protocol
    protocol_version: str = "1.0"

    # Default password policy (CLI and POST /password)
    output_length: int = 18
    minimum_lowercase: int = 1
    minimum_uppercase: int = 5
    minimum_numeric: int = 7
    minimum_special: int = 0
    special_characters: str = "*_"

    # Service limits
    max_output_length: int = 1024


settings = Settings()
