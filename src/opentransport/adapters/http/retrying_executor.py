"""HTTP exchange with bounded, fixed-pause retries.

Outcome classification per attempt:

- transport failure (connection refused, DNS, timeout): retryable
- HTTP status >= 500: retryable
- HTTP 200: success, the full body is returned
- anything else: pass-through, an empty result that is NOT an error

A 404 or 429 is not an error at this layer. It produces no bytes, and the
``FetchResult`` carries the status so higher layers can tell the
difference from an empty 200.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

import aiohttp

from opentransport.adapters.http.log_sinks import ClientLogSinks
from opentransport.adapters.http.request_builder import ApiRequest, validate_request
from opentransport.domain.errors import RequestValidationError, TransportError
from opentransport.domain.models.fetch_result import FetchOutcome, FetchResult
from opentransport.domain.models.request_context import RequestContext

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from opentransport.adapters.config.client_config import ClientConfig


class ServerStatusError(Exception):
    """The server answered with a 5xx status."""

    def __init__(self, status: int, reason: str | None) -> None:
        super().__init__(f"remote server responded with an error: {status} {reason or ''}".rstrip())
        self.status = status


_RETRYABLE_ERRORS = (aiohttp.ClientError, TimeoutError, ServerStatusError)


class RetryingExecutor:
    """Sends validated GET requests and retries transient failures."""

    def __init__(
        self,
        session_provider: Callable[[], "ClientSession"],
        config_provider: Callable[[], "ClientConfig"],
        sinks: ClientLogSinks,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """Initialize the executor.

        Args:
            session_provider: Returns the aiohttp session used for every attempt.
            config_provider: Returns the current client configuration. Read once
                per call so a retry policy change applies to the next call.
            sinks: Client log sinks for per-attempt diagnostics.
            sleep: Awaitable pause function, cancellable by the calling task.
        """
        self._session_provider = session_provider
        self._config_provider = config_provider
        self._sinks = sinks
        self._sleep = sleep

    async def execute(self, request: ApiRequest) -> FetchResult:
        """Perform the exchange, retrying on transient failures.

        Attempts are strictly sequential. With ``max_retry_attempts = n`` at
        most ``n + 1`` attempts are made, separated by the fixed pause.

        Args:
            request: Request built by ``build_request``.

        Returns:
            A BODY result for HTTP 200 or a PASS_THROUGH result for any other
            non-5xx status.

        Raises:
            RequestValidationError: If the request is invalid (never retried).
            TransportError: If all attempts failed or the context deadline passed.
        """
        try:
            validate_request(request)
        except RequestValidationError as e:
            raise RequestValidationError(f"invalid http request: {e}") from e

        config = self._config_provider()
        retries_left = config.max_retry_attempts
        attempt = 0
        last_error: Exception | None = None

        while True:
            if request.context.expired:
                raise TransportError(
                    f"request deadline exceeded after {attempt} attempts", attempts=attempt
                ) from last_error

            attempt += 1
            try:
                return await self._attempt(request, attempt)
            except _RETRYABLE_ERRORS as e:
                last_error = e

            if retries_left <= 0:
                break
            retries_left -= 1
            self._sinks.error.warning(
                f"Retry attempt {attempt} of {config.max_retry_attempts}: {last_error}"
            )
            await self._pause(request.context, config.retry_pause_seconds)

        raise TransportError(
            f"failed to perform the http request after {attempt} attempts: {last_error}",
            attempts=attempt,
        ) from last_error

    async def _attempt(self, request: ApiRequest, attempt: int) -> FetchResult:
        """Run one exchange and classify the response."""
        session = self._session_provider()
        kwargs: dict[str, Any] = {"headers": request.headers}
        remaining = request.context.remaining()
        if remaining is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=remaining)

        async with session.get(request.url, **kwargs) as response:
            self._sinks.debug.debug(
                f"GET {request.url} (attempt {attempt}): "
                f"server responded with status {response.status}"
            )

            if response.status >= 500:
                raise ServerStatusError(response.status, response.reason)

            if response.status == 200:
                body = await response.read()
                return FetchResult(FetchOutcome.BODY, response.status, body)

            return FetchResult(FetchOutcome.PASS_THROUGH, response.status)

    async def _pause(self, context: RequestContext, pause_seconds: int) -> None:
        """Sleep between attempts, never beyond the context deadline."""
        delay = float(pause_seconds)
        remaining = context.remaining()
        if remaining is not None:
            delay = min(delay, remaining)
        await self._sleep(delay)
