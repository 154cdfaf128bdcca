"""Per-call request context."""

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """Deadline scope bound to a single API call.

    Cancellation is handled by asyncio: cancelling the task that awaits a
    query interrupts both the network exchange and the pause between retries.
    The context adds an optional deadline on top of that.
    """

    deadline: float | None = None  # time.monotonic() based

    @classmethod
    def background(cls) -> "RequestContext":
        """Context without a deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "RequestContext":
        """Context expiring ``seconds`` from now."""
        if seconds <= 0:
            raise ValueError("timeout must be positive")
        return cls(deadline=time.monotonic() + seconds)

    def remaining(self) -> float | None:
        """Seconds left until the deadline, or None without a deadline."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    @property
    def expired(self) -> bool:
        """Whether the deadline has passed."""
        remaining = self.remaining()
        return remaining is not None and remaining <= 0
