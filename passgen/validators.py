"""Policy validators shared by the service and the CLI."""
from passgen.config import settings
from passgen.errors import ErrorCode, PasswordError
from passgen.logic.models import ALLOWED_SPECIAL_CHARACTERS
from passgen.protocol import PasswordRequest


def validate_length(output_length: int) -> None:
    """
    Validate the resolved length against service limits.

    Raises INVALID_REQUEST if it exceeds max_output_length.
    """
    if output_length > settings.max_output_length:
        raise PasswordError(
            ErrorCode.INVALID_REQUEST,
            f"Output length {output_length} exceeds limit "
            f"{settings.max_output_length}.",
        )


def validate_special_characters(special_characters: str) -> None:
    """
    Validate the special character alphabet.

    Raises INVALID_REQUEST unless every character is ASCII punctuation.
    """
    invalid = sorted(set(special_characters) - ALLOWED_SPECIAL_CHARACTERS)
    if invalid:
        raise PasswordError(
            ErrorCode.INVALID_REQUEST,
            f"Special characters must be ASCII punctuation, got {invalid}.",
        )


def validate_policy(output_length: int, special_characters: str) -> None:
    """Run all validations on a resolved policy."""
    validate_length(output_length)
    validate_special_characters(special_characters)


def validate_password_request(request: PasswordRequest) -> None:
    """Run all validations on password request, settings defaults applied."""
    policy = request.resolved()
    validate_policy(policy["output_length"], policy["special_characters"])
