"""Unbiased random sources for password generation."""
import logging
import secrets
from abc import ABC, abstractmethod
from typing import Callable

from passgen.errors import ErrorCode, PasswordError


logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF
UINT32_BYTES = 4


class RandomSource(ABC):
    """Abstract random source consumed by the password generator."""

    @abstractmethod
    def raw_uint32(self) -> int:
        """Return a uniform int in [0, UINT32_MAX]."""
        pass

    @abstractmethod
    def uniform_in_range(self, low: int, high: int) -> int:
        """Return a uniform int in [low, high] inclusive."""
        pass


class ByteRandomSource(RandomSource):
    """
    Random source built on a byte generator.

    Ranged draws use rejection sampling so no value in the range is favoured
    by modulo wraparound. Subclasses only supply get_bytes().
    """

    @abstractmethod
    def get_bytes(self, count: int) -> bytes:
        """Return count random bytes."""
        pass

    def raw_uint32(self) -> int:
        data = self.get_bytes(UINT32_BYTES)
        if len(data) != UINT32_BYTES:
            raise PasswordError(
                ErrorCode.ENTROPY_FAILURE,
                f"Entropy source returned {len(data)} bytes, expected {UINT32_BYTES}.",
            )
        return int.from_bytes(data, "little")

    def uniform_in_range(self, low: int, high: int) -> int:
        """
        Return a uniform int in [low, high] inclusive.

        Argument order does not matter. A collapsed range returns low without
        consuming entropy.
        """
        for value in (low, high):
            if not 0 <= value <= UINT32_MAX:
                raise ValueError(f"{value} is outside the unsigned 32-bit range")

        if low > high:
            low, high = high, low

        span = high - low
        if span == 0:
            return low
        if span == UINT32_MAX:
            # Only [0, UINT32_MAX] spans the full domain
            if low != 0:
                raise PasswordError(
                    ErrorCode.INTERNAL_ERROR,
                    f"Full-width range must start at 0, got {low}.",
                )
            return self.raw_uint32()
        return low + self.uniform_below(span + 1)

    def uniform_below(self, n: int) -> int:
        """Return a uniform int in [0, n) for 0 < n <= UINT32_MAX."""
        if not 0 < n <= UINT32_MAX:
            raise ValueError(f"Exclusive bound must be in (0, {UINT32_MAX}], got {n}")

        # limit + 1 is the largest multiple of n not above 2**32
        limit = UINT32_MAX - (((UINT32_MAX % n) + 1) % n)
        while True:
            value = self.raw_uint32()
            if value <= limit:
                return value % n


class SecureRandom(ByteRandomSource):
    """
    Random source backed by a cryptographically secure byte generator.

    Instances are not assumed to be thread-safe: use one per thread, or guard
    a shared instance externally.
    """

    def __init__(self, read_bytes: Callable[[int], bytes] | None = None):
        self._read_bytes = read_bytes or secrets.token_bytes

    def get_bytes(self, count: int) -> bytes:
        return self._read_bytes(count)


class SeededRandom(ByteRandomSource):
    """
    Deterministic random source for tests and audits.

    Same sampling as SecureRandom, bytes come from a seeded PRNG.
    Never use for real passwords.
    """

    def __init__(self, seed: int):
        import random

        self._rng = random.Random(seed)
        self.seed = seed
        logger.debug("SeededRandom initialised with seed=%d", seed)

    def get_bytes(self, count: int) -> bytes:
        return self._rng.randbytes(count)
