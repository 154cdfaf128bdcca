"""Error taxonomy for the OpenTransport client.

Every stage of the request pipeline raises its own error type so callers can
tell which stage failed. Underlying causes are always chained with ``from``.
"""


class OpenTransportError(Exception):
    """Base class for all errors raised by the client."""


class ConfigError(OpenTransportError, ValueError):
    """Invalid client configuration at construction or reconfiguration time."""


class ConstructionError(OpenTransportError):
    """The outbound request could not be built from base URL and path."""


class RequestValidationError(OpenTransportError):
    """A built request does not meet the structural rules for sending."""


class TransportError(OpenTransportError):
    """The HTTP exchange failed after the retry budget was spent."""

    def __init__(self, message: str, attempts: int = 0) -> None:
        super().__init__(message)
        self.attempts = attempts


class EmptyPayloadError(OpenTransportError):
    """A zero-length response body reached the decoder.

    ``status`` holds the HTTP status of the exchange when the body was empty
    because the server answered with neither 200 nor 5xx (e.g. 404 or 429).
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ParseError(OpenTransportError):
    """The response body is malformed or does not match the result schema."""


class QueryParameterError(OpenTransportError, ValueError):
    """A query parameter was rejected while building the request path."""


class TimestampDecodeError(OpenTransportError, ValueError):
    """A timestamp field holds a string that is not in the wire layout."""
