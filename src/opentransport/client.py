"""OpenTransport API client.

The client is the entry point of the library. It owns the configuration, the
log sinks and the aiohttp session, and it exposes the location, connection
and stationboard services.

Configure the client (user agent, retry policy, logging) before the first
query. The mutators are not synchronized against queries in flight.
"""

from collections.abc import Mapping
from types import TracebackType
from typing import Any, TextIO, TypeVar

import aiohttp
from pydantic import BaseModel

from opentransport.adapters.config.client_config import (
    ClientConfig,
    replace_config,
    validate_client_config,
)
from opentransport.adapters.http.log_sinks import ClientLogSinks
from opentransport.adapters.http.request_builder import ApiRequest, build_request
from opentransport.adapters.http.response_decoder import ResponseDecoder
from opentransport.adapters.http.retrying_executor import RetryingExecutor
from opentransport.adapters.services.connection_service import ConnectionService
from opentransport.adapters.services.location_service import LocationService
from opentransport.adapters.services.stationboard_service import StationboardService
from opentransport.domain.errors import ConfigError, EmptyPayloadError, QueryParameterError
from opentransport.domain.models.fetch_result import FetchResult
from opentransport.domain.models.request_context import RequestContext

ResultT = TypeVar("ResultT", bound=BaseModel)


class Client:
    """Client for the transport.opendata.ch timetable API.

    Usage::

        async with Client() as client:
            locations = await client.location.search("Zürich HB")
            board = await client.stationboard.search("Bern")
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        config: ClientConfig | Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            session: Optional aiohttp ClientSession. Without one the client opens
                its own session on the first request and closes it in ``close()``.
            config: Client configuration. The defaults (production URL, library
                user agent, 3 retries with 5 seconds pause) are used when omitted.

        Raises:
            ConfigError: If the configuration is invalid.
        """
        self._config = ClientConfig() if config is None else validate_client_config(config)
        self._session = session
        self._owns_session = session is None
        self._sinks = ClientLogSinks()
        self._executor = RetryingExecutor(
            session_provider=self._get_session,
            config_provider=lambda: self._config,
            sinks=self._sinks,
        )
        self._decoder = ResponseDecoder(self._sinks)

        self.location = LocationService(self)
        self.connection = ConnectionService(self)
        self.stationboard = StationboardService(self)

    @classmethod
    def with_url(cls, url: str, session: aiohttp.ClientSession | None = None) -> "Client":
        """Create a client for a custom API URL, keeping all other defaults.

        Raises:
            ConfigError: If the URL is empty or lacks scheme or host.
        """
        if not url:
            raise ConfigError("custom URL must not be empty")
        return cls(session=session, config={"api_base_url": url})

    @property
    def config(self) -> ClientConfig:
        """The active configuration."""
        return self._config

    @property
    def log_sinks(self) -> ClientLogSinks:
        return self._sinks

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the aiohttp session if the client created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    def enable_logging(self, stream: TextIO | None = None) -> None:
        """Write debug and error logs to ``stream``, or to stdout/stderr when omitted."""
        self._sinks.enable(stream)
        self._sinks.debug.info(
            f"Client is configured with target API: {self._config.api_base_url} "
            f"and useragent: '{self._config.user_agent}'"
        )

    def disable_logging(self) -> None:
        """Discard all log output (the initial state)."""
        self._sinks.disable()

    def set_user_agent(self, user_agent: str) -> None:
        """Set a custom user agent. An empty value restores the default."""
        self._config = replace_config(self._config, user_agent=user_agent)

    def set_retry_policy(self, attempts: int, pause_seconds: int) -> None:
        """Set the number of retries and the pause between attempts.

        Args:
            attempts: Retries after a failed attempt, between 0 and 10.
            pause_seconds: Fixed pause between attempts, at least 1 second.

        Raises:
            ConfigError: If a value is out of range. The current policy is kept.
        """
        try:
            self._config = replace_config(
                self._config, max_retry_attempts=attempts, retry_pause_seconds=pause_seconds
            )
        except ConfigError as e:
            raise ConfigError(f"failed to configure retry options: {e}") from e

    def new_request(self, path: str, context: RequestContext | None = None) -> ApiRequest:
        """Create a GET request for a path relative to the API base URL."""
        request = build_request(self._config.api_base_url, path, self._config.user_agent, context)
        self._sinks.debug.debug(f"Request url: {request.url}")
        return request

    async def execute(self, request: ApiRequest) -> FetchResult:
        """Send ``request`` with retries. See RetryingExecutor.execute."""
        return await self._executor.execute(request)

    def decode(self, raw: bytes, result_type: type[ResultT]) -> ResultT:
        """Decode a response body. See ResponseDecoder.decode."""
        return self._decoder.decode(raw, result_type)

    async def fetch(
        self,
        path: str,
        result_type: type[ResultT],
        context: RequestContext | None = None,
    ) -> ResultT:
        """Run the whole pipeline for one relative path.

        Raises:
            QueryParameterError: If ``path`` is empty.
            ConstructionError, RequestValidationError, TransportError: From the
                request and transport stages.
            EmptyPayloadError: If the body is empty. For a pass-through response
                (neither 200 nor 5xx) the error carries the HTTP status.
            ParseError: If the body cannot be decoded into ``result_type``.
        """
        if not path:
            raise QueryParameterError("the request path can not be empty")

        request = self.new_request(path, context)
        result = await self.execute(request)
        if result.is_pass_through:
            self._sinks.error.warning(
                f"Server responded with status {result.status} for {request.url}, "
                "returning an empty body"
            )
            raise EmptyPayloadError(
                f"response buffer is empty (server responded with status {result.status})",
                status=result.status,
            )
        return self.decode(result.body, result_type)
