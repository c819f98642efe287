from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from stream_shared.protocol.constants import RECONNECT_INTERVAL_SECONDS


class RetryPolicy(ABC):
    """Decides how long to wait before the next connection attempt."""

    @abstractmethod
    def next_delay(self, attempt: int) -> Optional[float]:
        """
        Delay in seconds before retry number `attempt` (1-based), or None to give up.

        Args:
            attempt: Count of consecutive failed sessions, including the one that just ended
        """
        pass


class FixedIntervalPolicy(RetryPolicy):
    """Same delay every time. Unlimited attempts unless `max_attempts` is set."""

    def __init__(self, interval: float = RECONNECT_INTERVAL_SECONDS, max_attempts: Optional[int] = None) -> None:
        if interval < 0:
            raise ValueError("interval must not be negative")
        self.interval = interval
        self.max_attempts = max_attempts

    def next_delay(self, attempt: int) -> Optional[float]:
        if self.max_attempts is not None and attempt > self.max_attempts:
            return None
        return self.interval

    def __repr__(self) -> str:
        return f"FixedIntervalPolicy(interval={self.interval}, max_attempts={self.max_attempts})"


class ExponentialBackoffPolicy(RetryPolicy):
    """Doubles the delay after each consecutive failure, capped at `maximum`."""

    def __init__(
        self,
        initial: float = RECONNECT_INTERVAL_SECONDS,
        maximum: float = 300.0,
        max_attempts: Optional[int] = None,
    ) -> None:
        if initial <= 0 or maximum < initial:
            raise ValueError("require 0 < initial <= maximum")
        self.initial = initial
        self.maximum = maximum
        self.max_attempts = max_attempts

    def next_delay(self, attempt: int) -> Optional[float]:
        if self.max_attempts is not None and attempt > self.max_attempts:
            return None
        exponent = min(max(attempt - 1, 0), 32)
        return min(self.initial * (2**exponent), self.maximum)

    def __repr__(self) -> str:
        return (
            f"ExponentialBackoffPolicy(initial={self.initial}, maximum={self.maximum}, "
            f"max_attempts={self.max_attempts})"
        )


__all__ = ["RetryPolicy", "FixedIntervalPolicy", "ExponentialBackoffPolicy"]
