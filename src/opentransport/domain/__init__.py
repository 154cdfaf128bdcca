"""Domain layer - result models, errors and ports."""

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
from opentransport.domain.ports import QueryGateway

__all__ = [
    "ConfigError",
    "ConstructionError",
    "EmptyPayloadError",
    "OpenTransportError",
    "ParseError",
    "QueryGateway",
    "QueryParameterError",
    "RequestValidationError",
    "TimestampDecodeError",
    "TransportError",
]
