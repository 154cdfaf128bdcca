"""Location search service."""

from opentransport.adapters.services.query_params import path_escape
from opentransport.domain.errors import QueryParameterError
from opentransport.domain.models.location import Location, LocationResult
from opentransport.domain.models.request_context import RequestContext
from opentransport.domain.models.transportation import LocationType
from opentransport.domain.ports.query_gateway import QueryGateway


class LocationService:
    """Search for stations, addresses and points of interest."""

    def __init__(self, gateway: QueryGateway) -> None:
        self._gateway = gateway

    async def search(
        self, name: str, context: RequestContext | None = None
    ) -> tuple[Location, ...]:
        """Search locations by name. The API autocompletes the name."""
        return await self.search_with_type(name, LocationType.ALL, context)

    async def search_with_type(
        self,
        name: str,
        location_type: LocationType,
        context: RequestContext | None = None,
    ) -> tuple[Location, ...]:
        """Search locations by name, restricted to ``location_type``.

        Args:
            name: Name or part of a name to search for.
            location_type: One of LocationType (all, station, poi, address).
            context: Optional call context.

        Returns:
            Locations in the order returned by the API.
        """
        if not name:
            raise QueryParameterError("no location name to search for")
        path = f"locations?query={path_escape(name)}&type={LocationType(location_type).value}"
        return await self._query(path, context)

    async def search_with_coordinates(
        self,
        latitude: float,
        longitude: float,
        context: RequestContext | None = None,
    ) -> tuple[Location, ...]:
        """Search locations around a coordinate. Results carry their distance."""
        path = f"locations?x={latitude:f}&y={longitude:f}"
        return await self._query(path, context)

    async def _query(self, path: str, context: RequestContext | None) -> tuple[Location, ...]:
        result = await self._gateway.fetch(path, LocationResult, context)
        return result.stations
