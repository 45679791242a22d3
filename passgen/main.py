"""Password generator FastAPI application."""
from fastapi import FastAPI, Request

from passgen.config import settings
from passgen.config_hash import get_config_hash
from passgen.errors import ConfigurationError, PasswordError
from passgen.logic.generator import PasswordGenerator
from passgen.logic.models import PasswordOptions
from passgen.middleware import ErrorHandlerMiddleware
from passgen.protocol import PasswordRequest, PasswordResponse
from passgen.telemetry import (
    telemetry_service,
    PasswordGeneratedEvent,
    PasswordRejectedEvent,
)
from passgen.validators import validate_password_request


app = FastAPI(
    title="passgen",
    version="0.1.0",
    description="Constrained random password generator",
    debug=settings.debug,
)

app.add_middleware(ErrorHandlerMiddleware)


@app.exception_handler(PasswordError)
async def password_error_handler(request: Request, exc: PasswordError):
    """Render PasswordError raised inside route handlers."""
    return exc.to_response()


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/password")
async def password(body: PasswordRequest) -> dict:
    """
    POST /password.

    Implements:
    - Request validation against service limits
    - Policy resolution (request fields over settings defaults)
    - One password per request from a fresh SecureRandom
    """
    try:
        validate_password_request(body)
        options = PasswordOptions(**body.resolved())
        generator = PasswordGenerator(options)
    except PasswordError as e:
        required = e.required_length if isinstance(e, ConfigurationError) else None
        telemetry_service.emit_password_rejected(
            PasswordRejectedEvent(
                reason=e.code.value,
                output_length=body.resolved()["output_length"],
                required_length=required,
                source="api",
            )
        )
        raise

    result = generator.generate()
    policy_hash = get_config_hash(options)

    telemetry_service.emit_password_generated(
        PasswordGeneratedEvent(
            policy_hash=policy_hash,
            output_length=options.output_length,
            required_length=options.required_length,
            special_alphabet_size=len(options.special_characters),
            source="api",
        )
    )

    return PasswordResponse(
        password=result,
        length=len(result),
        policyHash=policy_hash,
    ).model_dump()
