"""Decoding response bodies into result models."""

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from opentransport.adapters.http.log_sinks import ClientLogSinks
from opentransport.domain.errors import EmptyPayloadError, ParseError

ResultT = TypeVar("ResultT", bound=BaseModel)


class ResponseDecoder:
    """Turns raw JSON bodies into typed result aggregates."""

    def __init__(self, sinks: ClientLogSinks) -> None:
        self._sinks = sinks

    def decode(self, raw: bytes, result_type: type[ResultT]) -> ResultT:
        """Decode ``raw`` into ``result_type``.

        The emptiness check runs before JSON parsing, so an empty body is
        reported as EmptyPayloadError and never as a syntax error.

        Raises:
            EmptyPayloadError: If ``raw`` has zero length.
            ParseError: If ``raw`` is not valid JSON or does not fit the model.
        """
        if len(raw) == 0:
            raise EmptyPayloadError("response buffer is empty")

        try:
            result = result_type.model_validate_json(raw)
        except ValidationError as e:
            raise ParseError(f"failed to parse response: {e}") from e

        self._sinks.debug.debug(
            f"Parsed {result_type.__name__} response with {len(raw)} bytes to a structured type"
        )
        return result
