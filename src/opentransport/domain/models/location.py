"""Location domain models."""

from pydantic import BaseModel, ConfigDict


class Coordinate(BaseModel):
    """Coordinates of a location."""

    model_config = ConfigDict(frozen=True)

    type: str | None = None
    x: float | None = None  # latitude
    y: float | None = None  # longitude


class Location(BaseModel):
    """A station, address or point of interest."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None
    score: float | None = None
    coordinate: Coordinate | None = None
    distance: int | None = None  # meters, only set for coordinate searches
    icon: str | None = None  # train, tram, bus, ship or cableway

    @property
    def is_station(self) -> bool:
        """Whether the location is a station (stations carry an id)."""
        return bool(self.id)


class LocationResult(BaseModel):
    """Reply of the locations endpoint."""

    model_config = ConfigDict(frozen=True)

    stations: tuple[Location, ...] = ()
