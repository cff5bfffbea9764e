"""Retry policy for document store reads."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import structlog

T = TypeVar("T")

logger = structlog.get_logger()


@dataclass(frozen=True)
class ReadPolicy:
    """Fixed-delay retry for screen loads.

    ``attempts`` counts the initial try (attempts=2 => 1 try + 1 retry).
    Writes are never retried.
    """

    attempts: int = 2
    delay_seconds: float = 0.2

    def __post_init__(self) -> None:
        if self.attempts < 1:
            raise ValueError("attempts must be >= 1")
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")

    async def run(self, operation: str, fn: Callable[[], Awaitable[T]]) -> T:
        """Await ``fn``, retrying on any exception until attempts run out."""
        for attempt in range(1, self.attempts + 1):
            try:
                return await fn()
            except Exception as exc:
                if attempt >= self.attempts:
                    raise
                logger.warning(
                    "read_retry",
                    operation=operation,
                    attempt=attempt,
                    max_attempts=self.attempts,
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                if self.delay_seconds:
                    await asyncio.sleep(self.delay_seconds)
        raise AssertionError("unreachable")
