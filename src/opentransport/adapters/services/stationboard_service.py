"""Stationboard search service."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from opentransport.adapters.services.query_params import (
    format_stationboard_datetime,
    is_station_id,
    list_param,
    path_escape,
)
from opentransport.domain.errors import QueryParameterError
from opentransport.domain.models.request_context import RequestContext
from opentransport.domain.models.stationboard import StationboardResult
from opentransport.domain.models.transportation import Transportation
from opentransport.domain.ports.query_gateway import QueryGateway

DEFAULT_STATIONBOARD_LIMIT = 15


@dataclass(frozen=True)
class StationboardOptions:
    """Optional parameters of a stationboard search."""

    # Only return these means of transport
    transportations: Sequence[Transportation] = ()
    when: datetime | None = field(default_factory=datetime.now)
    # Arrivals instead of departures
    arrival: bool = False
    # Not a hard limit: journeys leaving at the same time as the last one are included
    limit: int = DEFAULT_STATIONBOARD_LIMIT


class StationboardService:
    """Departure and arrival boards of a single station."""

    def __init__(self, gateway: QueryGateway) -> None:
        self._gateway = gateway

    async def search(
        self, name: str, context: RequestContext | None = None
    ) -> StationboardResult:
        """Next departures from ``name`` (station name or id) starting now."""
        return await self.search_with_options(name, StationboardOptions(), context)

    async def search_with_date(
        self, name: str, when: datetime, context: RequestContext | None = None
    ) -> StationboardResult:
        """Departures from ``name`` starting at ``when``."""
        return await self.search_with_options(name, StationboardOptions(when=when), context)

    async def search_with_type(
        self,
        name: str,
        when: datetime,
        transportations: Sequence[Transportation],
        context: RequestContext | None = None,
    ) -> StationboardResult:
        """Departures from ``name`` filtered by means of transport.

        Raises:
            QueryParameterError: If the transportation filter is empty.
        """
        if not transportations:
            raise QueryParameterError(
                "transportation filter is empty (use search_with_date() instead)"
            )
        options = StationboardOptions(transportations=tuple(transportations), when=when)
        return await self.search_with_options(name, options, context)

    async def search_with_options(
        self,
        name: str,
        options: StationboardOptions,
        context: RequestContext | None = None,
    ) -> StationboardResult:
        """Departures or arrivals at ``name`` with explicit options.

        Args:
            name: Station name or station id.
            options: Filter, date, direction and limit. A limit of 0 disables it.
            context: Optional call context.

        Returns:
            The resolved station and its journeys.
        """
        path = self.build_path(name, options)
        return await self._gateway.fetch(path, StationboardResult, context)

    @staticmethod
    def build_path(name: str, options: StationboardOptions) -> str:
        """Build the relative ``stationboard?...`` path."""
        if not name:
            raise QueryParameterError("no location name or id to search for")

        transportations = list_param([str(t) for t in options.transportations], "transportations")
        station_key = "id" if is_station_id(name) else "station"
        direction = "arrival" if options.arrival else "departure"
        when = format_stationboard_datetime(options.when)

        return (
            f"stationboard?{station_key}={path_escape(name)}"
            f"&limit={options.limit}"
            f"&type={direction}"
            f"&datetime={path_escape(when)}"
            f"{transportations}"
        )
