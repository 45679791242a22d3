"""
Command-line password generator.

Usage:
    python -m passgen
    python -m passgen --length 24 --min-special 2 --special-chars '*_!'
    python -m passgen --seed 42   # reproducible, never for real passwords
"""
import argparse
import logging
import sys

from passgen.config import settings
from passgen.config_hash import get_config_hash
from passgen.errors import ConfigurationError, PasswordError
from passgen.logic.generator import PasswordGenerator
from passgen.logic.models import PasswordOptions
from passgen.logic.rng import SecureRandom, SeededRandom
from passgen.telemetry import PasswordGeneratedEvent, PasswordRejectedEvent, telemetry_service
from passgen.validators import validate_policy


# argparse uses 2 for usage errors; configuration errors share it
EXIT_CONFIGURATION_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate a random password with per-category minimums",
    )
    parser.add_argument(
        "--length",
        type=int,
        default=settings.output_length,
        help="Total password length",
    )
    parser.add_argument(
        "--min-lower",
        type=int,
        default=settings.minimum_lowercase,
        help="Minimum lowercase letters",
    )
    parser.add_argument(
        "--min-upper",
        type=int,
        default=settings.minimum_uppercase,
        help="Minimum uppercase letters",
    )
    parser.add_argument(
        "--min-numeric",
        type=int,
        default=settings.minimum_numeric,
        help="Minimum digits",
    )
    parser.add_argument(
        "--min-special",
        type=int,
        default=settings.minimum_special,
        help="Minimum special characters",
    )
    parser.add_argument(
        "--special-chars",
        type=str,
        default=settings.special_characters,
        help="Special character alphabet (empty string disables specials)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed a deterministic source for reproducible output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    counts = (args.length, args.min_lower, args.min_upper, args.min_numeric, args.min_special)
    if any(value < 0 for value in counts):
        print("error: lengths and minimums must be non-negative", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    try:
        validate_policy(args.length, args.special_chars)
        rng = SeededRandom(args.seed) if args.seed is not None else SecureRandom()
        options = PasswordOptions(
            output_length=args.length,
            minimum_lowercase=args.min_lower,
            minimum_uppercase=args.min_upper,
            minimum_numeric=args.min_numeric,
            minimum_special=args.min_special,
            special_characters=args.special_chars,
            random_source=rng,
        )
        generator = PasswordGenerator(options)
    except PasswordError as e:
        required = e.required_length if isinstance(e, ConfigurationError) else None
        telemetry_service.emit_password_rejected(
            PasswordRejectedEvent(
                reason=e.code.value,
                output_length=args.length,
                required_length=required,
                source="cli",
            )
        )
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    print(generator.generate())

    telemetry_service.emit_password_generated(
        PasswordGeneratedEvent(
            policy_hash=get_config_hash(options),
            output_length=options.output_length,
            required_length=options.required_length,
            special_alphabet_size=len(options.special_characters),
            source="cli",
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
