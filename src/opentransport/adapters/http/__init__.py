"""HTTP pipeline: request building, retrying transport and decoding."""

from opentransport.adapters.http.log_sinks import ClientLogSinks
from opentransport.adapters.http.request_builder import (
    ApiRequest,
    build_request,
    validate_request,
)
from opentransport.adapters.http.response_decoder import ResponseDecoder
from opentransport.adapters.http.retrying_executor import RetryingExecutor, ServerStatusError

__all__ = [
    "ApiRequest",
    "ClientLogSinks",
    "ResponseDecoder",
    "RetryingExecutor",
    "ServerStatusError",
    "build_request",
    "validate_request",
]
