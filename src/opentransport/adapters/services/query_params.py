"""Helpers for building API query strings."""

from collections.abc import Iterable
from datetime import datetime
from urllib.parse import quote

from opentransport.domain.errors import QueryParameterError

# Characters left unescaped in a query value (colon keeps times as HH:MM)
_SAFE_CHARS = ":@$"


def path_escape(value: str) -> str:
    """Percent-encode a single query value (spaces become %20)."""
    return quote(value, safe=_SAFE_CHARS)


def list_param(values: Iterable[str], name: str) -> str:
    """Serialize a list as repeated ``&name[]=value`` pairs.

    Example: ``&via[]=Bern&via[]=Olten``.

    Raises:
        QueryParameterError: If any element is empty.
    """
    params = []
    for index, value in enumerate(values):
        if not value:
            raise QueryParameterError(f"{name} filter at index {index} cannot be empty")
        params.append(f"&{name}[]={path_escape(str(value))}")
    return "".join(params)


def bool_param(value: bool) -> int:
    """Booleans are sent as 0 or 1."""
    return 1 if value else 0


def is_station_id(value: str) -> bool:
    """Return True if ``value`` looks like a station id (numeric, more than 5 digits)."""
    return len(value) > 5 and value.isascii() and value.isdigit()


def _require_date(when: datetime | None) -> datetime:
    if when is None:
        raise QueryParameterError("provided date is zero: please provide a valid datetime")
    return when


def format_connection_date(when: datetime | None) -> tuple[str, str]:
    """Split a datetime into the ``YYYY-MM-DD`` date and ``HH:MM`` time parameters."""
    when = _require_date(when)
    return when.strftime("%Y-%m-%d"), when.strftime("%H:%M")


def format_stationboard_datetime(when: datetime | None) -> str:
    """Format a datetime as ``YYYY-MM-DD HH:MM``."""
    return _require_date(when).strftime("%Y-%m-%d %H:%M")
