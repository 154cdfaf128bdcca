"""Result of one HTTP exchange as seen by the transport layer."""

from dataclasses import dataclass
from enum import Enum


class FetchOutcome(Enum):
    """How the exchange ended when it did not raise."""

    # HTTP 200, body holds the payload
    BODY = "body"
    # Neither 200 nor 5xx (redirects, 4xx): no payload and no error
    PASS_THROUGH = "pass_through"


@dataclass(frozen=True)
class FetchResult:
    """Success or pass-through outcome of the retrying executor.

    A pass-through result is not an error at the transport layer. A 404 or a
    429 comes back as an empty body with the status attached, and it is up
    to the caller to treat it as a failure.
    """

    outcome: FetchOutcome
    status: int
    body: bytes = b""

    @property
    def is_pass_through(self) -> bool:
        return self.outcome is FetchOutcome.PASS_THROUGH
