"""Query services for locations, connections and stationboards."""

from opentransport.adapters.services.connection_service import (
    ConnectionOptions,
    ConnectionService,
)
from opentransport.adapters.services.location_service import LocationService
from opentransport.adapters.services.stationboard_service import (
    StationboardOptions,
    StationboardService,
)

__all__ = [
    "ConnectionOptions",
    "ConnectionService",
    "LocationService",
    "StationboardOptions",
    "StationboardService",
]
