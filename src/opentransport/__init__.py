"""Async client for the Swiss public transport API (transport.opendata.ch)."""

from opentransport.adapters.config import (
    DEFAULT_API_URL,
    DEFAULT_MAX_RETRY,
    DEFAULT_RETRY_PAUSE,
    DEFAULT_USER_AGENT,
    ClientConfig,
)
from opentransport.adapters.services import ConnectionOptions, StationboardOptions
from opentransport.client import Client
from opentransport.domain.errors import (
    ConfigError,
    ConstructionError,
    EmptyPayloadError,
    OpenTransportError,
    ParseError,
    QueryParameterError,
    RequestValidationError,
    TimestampDecodeError,
    TransportError,
)
from opentransport.domain.models import (
    Accessibility,
    Connection,
    ConnectionResult,
    Coordinate,
    FetchOutcome,
    FetchResult,
    Journey,
    Location,
    LocationResult,
    LocationType,
    Prognosis,
    RequestContext,
    Section,
    StationboardJourney,
    StationboardResult,
    Stop,
    Transportation,
    Walk,
)

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_MAX_RETRY",
    "DEFAULT_RETRY_PAUSE",
    "DEFAULT_USER_AGENT",
    "Accessibility",
    "Client",
    "ClientConfig",
    "ConfigError",
    "Connection",
    "ConnectionOptions",
    "ConnectionResult",
    "ConstructionError",
    "Coordinate",
    "EmptyPayloadError",
    "FetchOutcome",
    "FetchResult",
    "Journey",
    "Location",
    "LocationResult",
    "LocationType",
    "OpenTransportError",
    "ParseError",
    "Prognosis",
    "QueryParameterError",
    "RequestContext",
    "RequestValidationError",
    "Section",
    "StationboardJourney",
    "StationboardOptions",
    "StationboardResult",
    "Stop",
    "TimestampDecodeError",
    "Transportation",
    "TransportError",
    "Walk",
]
