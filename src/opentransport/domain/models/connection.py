"""Connection domain models.

A connection is made of sections. Each section is either a journey with a
vehicle or a walk, framed by a departure and an arrival stop.
"""

from pydantic import BaseModel, ConfigDict, Field

from opentransport.domain.models.location import Location
from opentransport.domain.models.optional_timestamp import OptionalTimestamp

_WIRE_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class Prognosis(BaseModel):
    """Realtime estimate for a stop, overriding the scheduled values."""

    model_config = _WIRE_MODEL_CONFIG

    platform: str | None = None
    arrival: OptionalTimestamp = None
    departure: OptionalTimestamp = None
    capacity1st: int | None = None
    capacity2nd: int | None = None


class Stop(BaseModel):
    """Arrival or departure checkpoint at a station."""

    model_config = _WIRE_MODEL_CONFIG

    station: Location | None = None
    arrival: OptionalTimestamp = None
    departure: OptionalTimestamp = None
    delay: int | None = None
    platform: str | None = None
    prognosis: Prognosis | None = None


class Journey(BaseModel):
    """The vehicle used between two stations, e.g. a bus or a train."""

    model_config = _WIRE_MODEL_CONFIG

    name: str | None = None
    category: str | None = None
    subcategory: str | None = None
    category_code: int | None = Field(default=None, alias="categoryCode")
    number: str | None = None
    operator: str | None = None
    to: str | None = None
    pass_list: tuple[Stop, ...] = Field(default=(), alias="passList")
    capacity1st: int | None = None
    capacity2nd: int | None = None


class Walk(BaseModel):
    """Walking part of a connection."""

    model_config = _WIRE_MODEL_CONFIG

    duration: int | None = None


class Section(BaseModel):
    """One uninterrupted leg of a connection."""

    model_config = _WIRE_MODEL_CONFIG

    journey: Journey | None = None
    walk: Walk | None = None
    departure: Stop
    arrival: Stop


class ServiceDetails(BaseModel):
    """How regularly a connection operates."""

    model_config = _WIRE_MODEL_CONFIG

    regular: str | None = None
    irregular: str | None = None


class Connection(BaseModel):
    """A possible journey between two locations."""

    model_config = _WIRE_MODEL_CONFIG

    from_: Stop = Field(alias="from")
    to: Stop
    duration: str | None = None
    transfers: int | None = None
    service: ServiceDetails | None = None
    products: tuple[str, ...] = ()
    capacity1st: int | None = None
    capacity2nd: int | None = None
    sections: tuple[Section, ...] = ()


class ConnectionStations(BaseModel):
    """Stations the API resolved the search endpoints to."""

    model_config = _WIRE_MODEL_CONFIG

    from_: tuple[Location, ...] = Field(default=(), alias="from")
    to: tuple[Location, ...] = ()


class ConnectionResult(BaseModel):
    """Reply of the connections endpoint."""

    model_config = _WIRE_MODEL_CONFIG

    connections: tuple[Connection, ...] = ()
    from_: Location | None = Field(default=None, alias="from")
    to: Location | None = None
    stations: ConnectionStations | None = None
