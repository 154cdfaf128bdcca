"""Domain models for the OpenTransport client."""

from opentransport.domain.models.connection import (
    Connection,
    ConnectionResult,
    ConnectionStations,
    Journey,
    Prognosis,
    Section,
    ServiceDetails,
    Stop,
    Walk,
)
from opentransport.domain.models.fetch_result import FetchOutcome, FetchResult
from opentransport.domain.models.location import Coordinate, Location, LocationResult
from opentransport.domain.models.optional_timestamp import (
    OptionalTimestamp,
    format_optional_timestamp,
    parse_optional_timestamp,
)
from opentransport.domain.models.request_context import RequestContext
from opentransport.domain.models.stationboard import StationboardJourney, StationboardResult
from opentransport.domain.models.transportation import (
    Accessibility,
    LocationType,
    Transportation,
)

__all__ = [
    "Accessibility",
    "Connection",
    "ConnectionResult",
    "ConnectionStations",
    "Coordinate",
    "FetchOutcome",
    "FetchResult",
    "Journey",
    "Location",
    "LocationResult",
    "LocationType",
    "OptionalTimestamp",
    "Prognosis",
    "RequestContext",
    "Section",
    "ServiceDetails",
    "StationboardJourney",
    "StationboardResult",
    "Stop",
    "Transportation",
    "Walk",
    "format_optional_timestamp",
    "parse_optional_timestamp",
]
