"""Pytest fixtures and random-source doubles."""
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient

from passgen.logic.rng import RandomSource, SeededRandom
from passgen.main import app
from passgen.telemetry import telemetry_service


class CountingRandom(SeededRandom):
    """Seeded source that counts raw 32-bit draws."""

    def __init__(self, seed: int = 0):
        super().__init__(seed)
        self.raw_draws = 0

    def raw_uint32(self) -> int:
        self.raw_draws += 1
        return super().raw_uint32()


class RecordingRandom(RandomSource):
    """Records every ranged draw request, delegating to a seeded source."""

    def __init__(self, seed: int = 0):
        self._delegate = SeededRandom(seed)
        self.calls: list[tuple[int, int]] = []

    def raw_uint32(self) -> int:
        return self._delegate.raw_uint32()

    def uniform_in_range(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self._delegate.uniform_in_range(low, high)


class LowestRandom(RandomSource):
    """Always returns the smallest value of the requested range."""

    def raw_uint32(self) -> int:
        return 0

    def uniform_in_range(self, low: int, high: int) -> int:
        return min(low, high)


class OutOfRangeRandom(RandomSource):
    """Broken source returning one past the upper bound."""

    def raw_uint32(self) -> int:
        return 0

    def uniform_in_range(self, low: int, high: int) -> int:
        return max(low, high) + 1


class ScriptedBytes:
    """Byte source replaying fixed 32-bit values, little-endian."""

    def __init__(self, values: list[int]):
        self._chunks = [v.to_bytes(4, "little") for v in values]
        self.requests: list[int] = []

    def __call__(self, n: int) -> bytes:
        self.requests.append(n)
        return self._chunks.pop(0)


class RecordingSink:
    """Telemetry sink that stores emitted events."""

    def __init__(self):
        self.events: list[tuple[str, dict[str, Any]]] = []

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        self.events.append((event_name, data))


@pytest.fixture
def counting_random() -> CountingRandom:
    return CountingRandom(seed=1234)


@pytest.fixture
def recording_random() -> RecordingRandom:
    return RecordingRandom(seed=99)


@pytest.fixture
def lowest_random() -> LowestRandom:
    return LowestRandom()


@pytest.fixture
def out_of_range_random() -> OutOfRangeRandom:
    return OutOfRangeRandom()


@pytest.fixture
def scripted_bytes() -> type[ScriptedBytes]:
    """Factory: scripted_bytes([v1, v2, ...]) builds a replaying byte source."""
    return ScriptedBytes


@pytest.fixture
def recording_sink() -> Generator[RecordingSink, None, None]:
    """Swap the global telemetry sink for a recording one."""
    original_sink = telemetry_service._sink
    sink = RecordingSink()
    telemetry_service.set_sink(sink)
    yield sink
    telemetry_service.set_sink(original_sink)


@pytest.fixture
def test_client() -> TestClient:
    return TestClient(app)
