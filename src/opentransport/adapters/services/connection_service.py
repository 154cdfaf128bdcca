"""Connection search service."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from opentransport.adapters.services.query_params import (
    bool_param,
    format_connection_date,
    list_param,
    path_escape,
)
from opentransport.domain.errors import QueryParameterError
from opentransport.domain.models.connection import ConnectionResult
from opentransport.domain.models.request_context import RequestContext
from opentransport.domain.models.transportation import Accessibility, Transportation
from opentransport.domain.ports.query_gateway import QueryGateway

MAX_CONNECTION_LIMIT = 16


@dataclass(frozen=True)
class ConnectionOptions:
    """Optional parameters of a connection search."""

    is_arrival: bool = False
    transportations: Sequence[Transportation] = ()
    via: Sequence[str] = ()  # up to five via locations
    bike: bool = False
    couchette: bool = False  # implies direct
    sleeper: bool = False  # implies direct
    direct: bool = False
    accessibility: Accessibility | None = None
    limit: int = 0  # 1-16, 0 means the API default


class ConnectionService:
    """Search connections between two locations."""

    def __init__(self, gateway: QueryGateway) -> None:
        self._gateway = gateway

    async def search(
        self,
        from_: str,
        to: str,
        when: datetime,
        context: RequestContext | None = None,
    ) -> ConnectionResult:
        """Search the next connections departing at ``when``."""
        return await self.search_with_options(from_, to, when, ConnectionOptions(), context)

    async def search_via(
        self,
        from_: str,
        to: str,
        when: datetime,
        via: Sequence[str],
        context: RequestContext | None = None,
    ) -> ConnectionResult:
        """Search connections passing one or more via locations."""
        return await self.search_with_options(
            from_, to, when, ConnectionOptions(via=tuple(via)), context
        )

    async def search_with_options(
        self,
        from_: str,
        to: str,
        when: datetime,
        options: ConnectionOptions,
        context: RequestContext | None = None,
    ) -> ConnectionResult:
        """Search connections with explicit options.

        Raises:
            QueryParameterError: If the date is missing, a via or transportation
                entry is empty or the limit is out of range.
        """
        path = self.build_path(from_, to, when, options)
        return await self._gateway.fetch(path, ConnectionResult, context)

    @staticmethod
    def build_path(from_: str, to: str, when: datetime | None, options: ConnectionOptions) -> str:
        """Build the relative ``connections?...`` path."""
        date, time = format_connection_date(when)
        if not 0 <= options.limit <= MAX_CONNECTION_LIMIT:
            raise QueryParameterError(
                f"limit must be between 0 and {MAX_CONNECTION_LIMIT}, got {options.limit}"
            )

        via = list_param(options.via, "via")
        transportations = list_param(
            [str(t) for t in options.transportations], "transportations"
        )

        path = (
            f"connections?from={path_escape(from_)}&to={path_escape(to)}"
            f"&date={date}&time={time}"
            f"&isArrivalTime={bool_param(options.is_arrival)}"
            f"&direct={bool_param(options.direct)}"
            f"&bike={bool_param(options.bike)}"
            f"&sleeper={bool_param(options.sleeper)}"
            f"&couchette={bool_param(options.couchette)}"
            f"{via}{transportations}"
            f"&limit={options.limit}"
        )
        if options.accessibility is not None:
            path += f"&accessibility={Accessibility(options.accessibility).value}"
        return path
