"""Optional timestamp wire type.

The API sends arrival and departure instants as ``2020-04-25T14:32:00+0200``
and uses ``null`` or an empty string when an instant is unknown. The decode
rule lives here so every model field that carries such an instant shares it.
"""

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from opentransport.domain.errors import TimestampDecodeError

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Zone is either "Z" or a signed offset without colon (e.g. +0200)
_TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(Z|[+-]\d{4})$")


def parse_optional_timestamp(value: Any) -> datetime | None:
    """Decode one timestamp field.

    Args:
        value: Raw field value as delivered by the JSON parser.

    Returns:
        ``None`` when the instant is absent, otherwise a timezone-aware datetime.

    Raises:
        TimestampDecodeError: If the value is present but not in the wire layout,
            or is a datetime without timezone offset.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.utcoffset() is None:
            raise TimestampDecodeError(f"timestamp {value.isoformat()} has no timezone offset")
        return value
    if not isinstance(value, str):
        raise TimestampDecodeError(f"expected a timestamp string, got {type(value).__name__}")

    raw = value
    if raw == "" or raw == "null":
        return None

    if not _TIMESTAMP_PATTERN.fullmatch(raw):
        raise TimestampDecodeError(
            f"timestamp '{raw}' does not match layout YYYY-MM-DDTHH:MM:SS+HHMM"
        )

    if raw.endswith("Z"):
        raw = raw[:-1] + "+0000"

    try:
        return datetime.strptime(raw, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise TimestampDecodeError(f"invalid timestamp '{raw}': {e}") from e


def format_optional_timestamp(value: datetime | None) -> str | None:
    """Encode a timestamp in the same layout the API sends."""
    if value is None:
        return None
    return value.strftime(TIMESTAMP_FORMAT)


OptionalTimestamp = Annotated[
    datetime | None,
    BeforeValidator(parse_optional_timestamp),
    PlainSerializer(format_optional_timestamp, return_type=str | None),
]
