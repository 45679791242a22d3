"""Generation telemetry. Events never carry the generated password."""
import logging
from dataclasses import dataclass
from typing import Any, Protocol


logger = logging.getLogger(__name__)


class TelemetrySink(Protocol):
    """Protocol for telemetry sinks."""

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        """Emit a telemetry event."""
        ...


class LoggingTelemetrySink:
    """Default sink that logs telemetry events."""

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        """Log telemetry event."""
        logger.info("TELEMETRY %s: %s", event_name, data)


@dataclass
class PasswordGeneratedEvent:
    """password_generated telemetry event."""

    policy_hash: str
    output_length: int
    required_length: int
    special_alphabet_size: int
    source: str  # "api" | "cli"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for emission."""
        return {
            "policy_hash": self.policy_hash,
            "output_length": self.output_length,
            "required_length": self.required_length,
            "special_alphabet_size": self.special_alphabet_size,
            "source": self.source,
        }


@dataclass
class PasswordRejectedEvent:
    """password_rejected telemetry event."""

    reason: str  # "INVALID_CONFIGURATION" | "INVALID_REQUEST"
    output_length: int
    required_length: int | None
    source: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for emission."""
        return {
            "reason": self.reason,
            "output_length": self.output_length,
            "required_length": self.required_length,
            "source": self.source,
        }


class TelemetryService:
    """Service for emitting generation telemetry events."""

    def __init__(self, sink: TelemetrySink | None = None):
        self._sink = sink or LoggingTelemetrySink()
        self._sink_errors = 0  # Counter for sink failures

    def set_sink(self, sink: TelemetrySink) -> None:
        """Set the telemetry sink (useful for testing)."""
        self._sink = sink

    def _safe_emit(self, event_name: str, data: dict[str, Any]) -> None:
        """
        Emit event with exception safety.

        Sink failures MUST NOT break password generation.
        """
        try:
            self._sink.emit(event_name, data)
        except Exception as e:
            self._sink_errors += 1
            logger.warning(
                "Telemetry sink error (count=%d): %s - %s",
                self._sink_errors,
                event_name,
                str(e),
            )

    def emit_password_generated(self, event: PasswordGeneratedEvent) -> None:
        self._safe_emit("password_generated", event.to_dict())

    def emit_password_rejected(self, event: PasswordRejectedEvent) -> None:
        self._safe_emit("password_rejected", event.to_dict())


# Global instance
telemetry_service = TelemetryService()
